"""
main.py - Scene player entry point
----------------------------------

Responsible for:
- loading configuration
- configuring the logger
- loading every configured scene (all or nothing)
- reporting each scene's layers and total duration

Presentation hosts import the same pieces (ConfigManager, SceneCatalog,
PlaybackController) instead of running this module.
"""

import sys

# Set UTF-8 encoding for output (logger uses tree / symbol characters)
if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore

from engine.timeline import layer_total_duration, scene_total_duration
from managers import ConfigManager
from models.enums import LogCategory
from parsing.errors import SceneError
from utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.SYSTEM)


def main() -> int:
    config = ConfigManager()
    config.load()

    logging_settings = config.logging_settings
    configure_logger(logging_settings.level, logging_settings.colors)

    try:
        catalog = config.build_catalog()
    except SceneError as ex:
        log.error("Scene catalog could not be loaded", code=ex.code, error=str(ex))
        return 1

    for title, scene in zip(catalog.titles, catalog.scenes):
        log.info(
            f"Scene {title}",
            size=f"{scene.size.width:g}x{scene.size.height:g}",
            layers=len(scene.layers),
            layer_durations=[f"{layer_total_duration(layer):g}s" for layer in scene.layers],
            total_duration=f"{scene_total_duration(scene):g}s",
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
