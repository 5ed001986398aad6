#!/usr/bin/env python3
"""
hbsdcontrol error types

Every failure raised by the feature state engine, the attribute store
adapters and the CLI derives from HbsdControlError so callers can report
them uniformly. A Conflict state is not an error and has no type here.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import errno as errno_module
import os
from typing import Any


class HbsdControlError(Exception):
    """Base class for all hbsdcontrol errors"""

    pass


class MalformedAttributeList(HbsdControlError):
    """An attribute listing buffer could not be decoded"""

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.offset = offset


class MalformedAttributeValue(HbsdControlError):
    """A stored attribute value is not one of the decimal digits 0 or 1"""

    def __init__(self, attribute: str, value: bytes):
        super().__init__(f"{attribute}: invalid value {value!r}, expected b'0' or b'1'")
        self.attribute = attribute
        self.value = value


class UnknownFeature(HbsdControlError):
    """A feature name is not present in the registry"""

    def __init__(self, name: str, known: tuple[str, ...] = ()):
        message = f"unknown feature: {name}"
        if known:
            message += f" (known features: {', '.join(known)})"
        super().__init__(message)
        self.name = name
        self.known = known


class AttributeStoreFailure(HbsdControlError):
    """
    An attribute store operation failed.

    Attributes:
        operation: list, get, set or delete
        path: File the operation targeted
        attribute: Attribute name, None for list
        errno: OS error number when the failure came from a system call
        failures: Per-attribute failures collected by multi-write operations
    """

    def __init__(
        self,
        operation: str,
        path: str,
        attribute: str | None = None,
        errno: int | None = None,
        failures: list["AttributeStoreFailure"] | None = None,
        detail: str | None = None,
    ):
        self.operation = operation
        self.path = path
        self.attribute = attribute
        self.errno = errno
        self.failures = failures or []
        super().__init__(self._format_message(detail))

    def _format_message(self, detail: str | None) -> str:
        target = f"{self.path}: {self.attribute}" if self.attribute else self.path
        reason = detail
        if reason is None and self.errno is not None:
            reason = os.strerror(self.errno)
        if reason is None and self.failures:
            reason = "; ".join(str(failure) for failure in self.failures)
        return f"{self.operation} failed on {target}" + (f": {reason}" if reason else "")

    @classmethod
    def combine(cls, operation: str, path: str, failures: list["AttributeStoreFailure"]):
        """Wrap several failures of one logical operation into a single error"""
        if len(failures) == 1:
            return failures[0]
        return cls(operation, path, failures=failures)

    def to_dict(self) -> dict[str, Any]:
        return {
            "operation": self.operation,
            "path": self.path,
            "attribute": self.attribute,
            "errno": errno_module.errorcode.get(self.errno, self.errno) if self.errno else None,
            "message": str(self),
        }


class PrivilegeRequired(HbsdControlError):
    """The caller lacks the privileges needed to manage system attributes"""

    pass


class FileNotFound(HbsdControlError):
    """The target file does not exist"""

    def __init__(self, path: str):
        super().__init__(f"{path}: no such file or directory")
        self.path = path
