#!/usr/bin/env python3
"""
hbsdcontrol Configuration Management
"""

import copy
import os
from pathlib import Path
from typing import Any

from .config_store import ConfigStore
from .core.constants import DEFAULT_LIST_BUFFER_LIMIT
from .core.errors import HbsdControlError


class Config:
    """Configuration manager for hbsdcontrol"""

    DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
        "general": {"keep_going": False},
        "output": {"format": "table", "json_indent": 2},
        "logging": {"log_file": None},
        "extattr": {"list_buffer_limit": DEFAULT_LIST_BUFFER_LIMIT},
    }

    OUTPUT_FORMATS = ("table", "json")

    def __init__(self, config_path: str | None = None):
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path or self._get_default_config_path()

        # Defaults apply when no file exists; one is never created implicitly
        if os.path.exists(self.config_path):
            self.load_config()

    def _get_default_config_path(self) -> str:
        """Get default configuration file path"""
        return str(Path.home() / ".hbsdcontrol" / "config.json")

    def load_config(self) -> None:
        """Load configuration from file"""
        user_config = ConfigStore.load(self.config_path)
        if user_config:
            self._merge_config(user_config)

    def _merge_config(self, user_config: dict[str, Any]) -> None:
        """Merge user configuration with defaults"""
        for section, settings in user_config.items():
            if section in self.config and isinstance(settings, dict):
                self.config[section].update(settings)
            else:
                self.config[section] = settings

    def get(self, section: str, key: str | None = None, default: Any = None) -> Any:
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        return self.config.get(section, {}).get(key, default)

    def _int_setting(self, section: str, key: str, default: int, minimum: int) -> int:
        value = self.get(section, key, default)
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise HbsdControlError(
                f"{self.config_path}: {section}.{key} must be an integer, got {value!r}"
            ) from None
        if number < minimum:
            raise HbsdControlError(f"{self.config_path}: {section}.{key} must be >= {minimum}")
        return number

    @property
    def output_format(self) -> str:
        fmt = self.get("output", "format", "table")
        return fmt if fmt in self.OUTPUT_FORMATS else "table"

    @property
    def json_indent(self) -> int:
        return self._int_setting("output", "json_indent", 2, minimum=0)

    @property
    def log_file(self) -> str | None:
        return self.get("logging", "log_file")

    @property
    def list_buffer_limit(self) -> int:
        return self._int_setting(
            "extattr", "list_buffer_limit", DEFAULT_LIST_BUFFER_LIMIT, minimum=1
        )

    @property
    def keep_going(self) -> bool:
        value = self.get("general", "keep_going", False)
        if not isinstance(value, bool):
            raise HbsdControlError(
                f"{self.config_path}: general.keep_going must be true or false, got {value!r}"
            )
        return value
