#!/usr/bin/env python3
"""
hbsdcontrol CLI Input Validation Module

Privilege and target file checks run before any attribute is touched.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import os
from pathlib import Path

from ..core.errors import FileNotFound, PrivilegeRequired


def check_privileges() -> None:
    """
    Require an effective uid of 0.

    System namespace attributes can only be read and written by root.

    Raises:
        PrivilegeRequired: The process is not running as root
    """
    if os.geteuid() != 0:
        raise PrivilegeRequired("hbsdcontrol must be run as root")


def validate_target_file(filename: str) -> str:
    """
    Check that a target path exists.

    Symlinks are followed, matching extattr_*_file(2).

    Returns:
        The path unchanged

    Raises:
        FileNotFound: The path does not exist
    """
    if not Path(filename).exists():
        raise FileNotFound(filename)
    return filename
