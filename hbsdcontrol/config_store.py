#!/usr/bin/env python3
"""
Configuration persistence utilities for hbsdcontrol.

This module encapsulates file IO for loading configuration data,
keeping the Config model focused on defaults and accessors. The
configuration file is only ever read.
"""

from __future__ import annotations

import json
from typing import Any

from .utils.logger import get_logger

logger = get_logger(__name__)


class ConfigStore:
    """Load configuration dictionaries from disk."""

    @staticmethod
    def load(path: str) -> dict[str, Any] | None:
        """Load configuration from a JSON file path."""
        try:
            with open(path) as handle:
                data = json.load(handle)
            if isinstance(data, dict):
                return data
            logger.warning(f"Ignoring config {path}: top level is not an object")
        except (OSError, ValueError) as exc:
            logger.warning(f"Could not load config from {path}: {exc}")
        return None
