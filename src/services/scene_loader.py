"""Scene loader - Reads named scene blocks and parses them into Scenes"""

from typing import TYPE_CHECKING

from models.domain import Scene
from models.enums import LogCategory
from parsing.errors import SceneError
from parsing.scene_parser import parse_scene
from utils.logger import get_category_logger

if TYPE_CHECKING:
    from services.resource_provider import IResourceProvider

log = get_category_logger(LogCategory.LOADER)


class SceneLoader:
    """
    Loads one Scene per identifier, all or nothing.

    Example:
        loader = SceneLoader(DirectoryResourceProvider("config/scenes"))
        scene = loader.load_scene("0")
    """

    def __init__(self, provider: 'IResourceProvider'):
        self.provider = provider

    def load_scene(self, identifier: str) -> Scene:
        """
        Read and parse a scene block.

        Raises:
            SceneError: missing resource or malformed content; details
                include the identifier. No partial Scene is produced.
        """
        identifier = str(identifier)
        try:
            text = self.provider.read_text(identifier)
            scene = parse_scene(text)
        except SceneError as ex:
            ex.with_details(identifier=identifier)
            log.error(f"Failed to load scene '{identifier}'", code=ex.code, error=ex.message)
            raise

        log.debug(f"Loaded scene '{identifier}'", layers=len(scene.layers))
        return scene
