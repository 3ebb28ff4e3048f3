"""
Application plumbing shared by the browser core and the Qt shell.
"""
from .events import Signal
from .config import AppConfig, ConfigManager
from .logging import setup_logging

__all__ = ["Signal", "AppConfig", "ConfigManager", "setup_logging"]
