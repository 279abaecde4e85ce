"""Scene catalog - Ordered set of scenes shown by the presentation layer"""

from typing import Iterable, Iterator, List, Tuple

from models.domain import Scene
from models.enums import LogCategory
from services.scene_loader import SceneLoader
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.LOADER)


class SceneCatalog:
    """
    Eagerly loads the given scene identifiers, in order.

    The identifier list is injected (from config or the caller); the
    identifier string doubles as the scene's title in list views.
    Any failing scene aborts construction of the whole catalog.

    Example:
        catalog = SceneCatalog(loader, ["0", "1", "2"])
        title, scene = catalog.entry(1)
    """

    def __init__(self, loader: SceneLoader, identifiers: Iterable[str]):
        self.loader = loader
        self._titles: Tuple[str, ...] = tuple(str(i) for i in identifiers)
        self._scenes: Tuple[Scene, ...] = tuple(self.loader.load_scene(i) for i in self._titles)

        log.info(f"SceneCatalog: {len(self._scenes)} scenes loaded")

    @property
    def titles(self) -> List[str]:
        return list(self._titles)

    @property
    def scenes(self) -> List[Scene]:
        return list(self._scenes)

    def get(self, index: int) -> Scene:
        """Scene at list position `index`"""
        return self._scenes[index]

    def entry(self, index: int) -> Tuple[str, Scene]:
        """(title, scene) at list position `index`"""
        return self._titles[index], self._scenes[index]

    def __len__(self) -> int:
        return len(self._scenes)

    def __iter__(self) -> Iterator[Scene]:
        return iter(self._scenes)
