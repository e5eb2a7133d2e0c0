#!/usr/bin/env python3
"""
extrestore Configuration Management
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Optional

from .config_store import ConfigStore
from .core.constants import DATABASE_ENCODING, HEADER_SIZE_BYTES
from .core.matcher import clamp_header_size


class Config:
    """Configuration manager for extrestore"""

    DEFAULT_CONFIG = {
        "general": {"verbose": False},
        "database": {"path": "", "encoding": DATABASE_ENCODING},
        "matching": {"header_size": HEADER_SIZE_BYTES},
        "restore": {"enabled": True, "overwrite": False},
        "logging": {"level": "WARNING", "file": True},
    }

    def __init__(self, config_path: Optional[str] = None):
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path or self._get_default_config_path()

        # Load configuration if exists
        if os.path.exists(self.config_path):
            self.load_config()
        else:
            self.save_config()  # Create default config

    def _get_default_config_path(self) -> str:
        """Get default configuration file path"""
        return str(Path.home() / ".extrestore" / "config.json")

    def load_config(self):
        """Load configuration from file"""
        user_config = ConfigStore.load(self.config_path)
        if user_config:
            self._merge_config(user_config)

    def save_config(self):
        """Save configuration to file"""
        ConfigStore.save(self.config_path, self.config)

    def _merge_config(self, user_config: dict[str, Any]):
        """Merge user configuration with defaults"""
        for section, settings in user_config.items():
            if section in self.config and isinstance(settings, dict):
                self.config[section].update(settings)
            else:
                self.config[section] = settings

    def get(self, section: str, key: Optional[str] = None, default=None):
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        section_data = self.config.get(section, {})
        if not isinstance(section_data, dict):
            return default
        return section_data.get(key, default)

    def set(self, section: str, key: str, value):
        """Set configuration value"""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def get_database_path(self) -> Optional[str]:
        """Custom signature database path, or None for the bundled one"""
        path = self.get("database", "path")
        if not path:
            return None
        return os.path.expanduser(str(path))

    def get_header_size(self) -> int:
        """Number of leading bytes to compare, never more than HEADER_SIZE_BYTES"""
        return clamp_header_size(self.get("matching", "header_size", HEADER_SIZE_BYTES))

    def get_log_level(self) -> int:
        """Configured logging level as a logging module constant"""
        level = logging.getLevelName(str(self.get("logging", "level", "WARNING")).upper())
        return level if isinstance(level, int) else logging.WARNING

    def is_restore_enabled(self) -> bool:
        return bool(self.get("restore", "enabled", True))

    def allow_overwrite(self) -> bool:
        return bool(self.get("restore", "overwrite", False))

    def __getitem__(self, key):
        """Allow dict-like access"""
        return self.config[key]

    def __contains__(self, key):
        """Allow 'in' operator"""
        return key in self.config
