"""Configuration module for WordMaster."""

from .settings import Config
from .languages import LANG_CONFIG, get_strings
from .config_manager import SettingsManager

__all__ = [
    'Config',
    'LANG_CONFIG',
    'get_strings',
    'SettingsManager',
]
