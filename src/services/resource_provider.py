"""
Scene resource providers

Named text blocks the SceneLoader reads from. The loader only depends on
the IResourceProvider protocol, so scenes can come from a directory on
disk or from memory.
"""

from __future__ import annotations
from pathlib import Path
from typing import Mapping, Protocol, Union

from models.enums import LogCategory
from parsing.errors import SceneResourceNotFoundError, SceneResourceUnreadableError
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.LOADER)


class IResourceProvider(Protocol):
    """
    Minimal contract for a named-text source.

    read_text must raise SceneResourceNotFoundError when the identifier
    is unknown and SceneResourceUnreadableError when it cannot be read.
    """

    def read_text(self, identifier: str) -> str:
        ...


class DirectoryResourceProvider:
    """
    Reads `<root>/<identifier><suffix>` as UTF-8.

    Example:
        provider = DirectoryResourceProvider("config/scenes")
        text = provider.read_text("0")   # config/scenes/0.txt
    """

    def __init__(self, root: Union[str, Path], suffix: str = ".txt"):
        self.root = Path(root)
        self.suffix = suffix

    def path_for(self, identifier: str) -> Path:
        return self.root / f"{identifier}{self.suffix}"

    def read_text(self, identifier: str) -> str:
        path = self.path_for(identifier)
        try:
            return path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            raise SceneResourceNotFoundError(identifier, str(path)) from None
        except (OSError, UnicodeDecodeError) as ex:
            raise SceneResourceUnreadableError(identifier, str(path), ex) from ex

    def __repr__(self):
        return f"DirectoryResourceProvider({str(self.root)!r}, suffix={self.suffix!r})"


class InMemoryResourceProvider:
    """Serves scene text from a mapping (tests, embedded scenes)"""

    def __init__(self, blocks: Mapping[str, str]):
        self.blocks = dict(blocks)

    def read_text(self, identifier: str) -> str:
        try:
            return self.blocks[identifier]
        except KeyError:
            raise SceneResourceNotFoundError(identifier) from None
