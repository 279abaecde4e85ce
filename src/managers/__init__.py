"""
Managers for configuration
"""

from .config_manager import ConfigManager, SceneSettings, LoggingSettings

__all__ = ['ConfigManager', 'SceneSettings', 'LoggingSettings']
