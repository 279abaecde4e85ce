"""Services layer"""

from .resource_provider import IResourceProvider, DirectoryResourceProvider, InMemoryResourceProvider
from .scene_loader import SceneLoader
from .scene_catalog import SceneCatalog

__all__ = [
    "IResourceProvider",
    "DirectoryResourceProvider",
    "InMemoryResourceProvider",
    "SceneLoader",
    "SceneCatalog",
]
