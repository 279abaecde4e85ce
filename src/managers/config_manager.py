"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files and exposes scene and logging settings.
"""

import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import List, Dict, Tuple

from models.enums import LogCategory, LogLevel
from services.resource_provider import DirectoryResourceProvider
from services.scene_catalog import SceneCatalog
from services.scene_loader import SceneLoader
from utils.enum_helper import EnumHelper
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.CONFIG)

SRC_DIR = Path(__file__).parent.parent


@dataclass(frozen=True)
class SceneSettings:
    """Where scene blocks live and which ones to show, in order"""
    directory: Path
    suffix: str
    identifiers: Tuple[str, ...]


@dataclass(frozen=True)
class LoggingSettings:
    level: LogLevel
    colors: bool


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes include: directive to load modular YAML files.

    Example:
        config = ConfigManager()
        config.load()

        scenes = config.scene_settings           # SceneSettings
        catalog = config.build_catalog()         # SceneCatalog with every configured scene
    """

    def __init__(self, config_path="config/config.yaml", defaults_path="config/factory_defaults.yaml",
                 base_dir: Path = SRC_DIR):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (relative to base_dir)
            defaults_path: Path to factory defaults fallback
            base_dir: Directory relative paths resolve against (default: src/)
        """
        self.base_dir = Path(base_dir)
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict = {}

    def load(self) -> Dict:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat as monolithic config
        4. Fallback to factory defaults on failure

        Returns:
            Merged config data dict
        """
        full_path = self.base_dir / self.config_path
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f) or {}

            if 'include' in main_config:
                log.info("Using include-based configuration")
                self.data = self._load_with_includes(main_config['include'], full_path.parent)
            else:
                log.info("Using monolithic configuration")
                self.data = main_config

        except (OSError, yaml.YAMLError) as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            defaults_path = self.base_dir / self.factory_defaults_path
            with open(defaults_path, "r", encoding="utf-8") as f:
                self.data = yaml.safe_load(f) or {}

        return self.data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["scenes.yaml", "logging.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict
        """
        merged = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    file_data = yaml.safe_load(f)
                    if file_data:
                        merged.update(file_data)
                        log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())[:10]))
        return merged

    # ===== Settings API =====

    @property
    def scene_settings(self) -> SceneSettings:
        """
        Scene source settings

        `scenes.identifiers` lists scene names in display order. When it is
        absent, `scenes.count: N` expands to "0" .. "N-1".
        """
        scenes = self.data.get("scenes", {}) or {}

        identifiers = scenes.get("identifiers")
        if identifiers is None:
            identifiers = range(int(scenes.get("count", 0)))
        if not identifiers:
            log.warn("No scenes configured!")

        directory = Path(scenes.get("directory", "config/scenes"))
        if not directory.is_absolute():
            directory = self.base_dir / directory

        return SceneSettings(
            directory=directory,
            suffix=scenes.get("suffix", ".txt"),
            identifiers=tuple(str(i) for i in identifiers),
        )

    @property
    def logging_settings(self) -> LoggingSettings:
        logging_cfg = self.data.get("logging", {}) or {}
        level = EnumHelper.from_string(LogLevel, str(logging_cfg.get("level", "INFO")), default=LogLevel.INFO)
        return LoggingSettings(level=level, colors=bool(logging_cfg.get("colors", True)))

    # ===== Factories =====

    def build_loader(self) -> SceneLoader:
        settings = self.scene_settings
        return SceneLoader(DirectoryResourceProvider(settings.directory, settings.suffix))

    def build_catalog(self) -> SceneCatalog:
        """Load every configured scene (all or nothing)"""
        return SceneCatalog(self.build_loader(), self.scene_settings.identifiers)
