#!/usr/bin/env python3
"""
Attribute Store Protocol Interface

This module defines the Protocol interface for the extended attribute
facility the feature state engine depends on. Every operation is scoped to
the system namespace and one file path at a time.

Using Protocol instead of ABC allows the ctypes backed adapter, the
in-memory store and test doubles to be used interchangeably without a
common base class.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AttributeStoreInterface(Protocol):
    """
    Protocol for system namespace extended attribute access.

    Implementations raise AttributeStoreFailure for failed calls and
    FileNotFound when the target path does not exist.
    """

    def list(self, path: str) -> bytes:
        """
        Enumerate attribute names on a file.

        Returns:
            Length-prefixed listing buffer, empty when the file has none
        """
        ...

    def get(self, path: str, name: str) -> bytes | None:
        """
        Read the raw value of one attribute.

        Returns:
            Raw value bytes, or None when the attribute does not exist
        """
        ...

    def set(self, path: str, name: str, value: int) -> None:
        """Store an integer value as its decimal string."""
        ...

    def delete(self, path: str, name: str) -> None:
        """Remove an attribute; removing a missing attribute is a no-op."""
        ...


@runtime_checkable
class FileFlagsInterface(Protocol):
    """Protocol for toggling the system immutable file flag."""

    def is_immutable(self, path: str) -> bool: ...

    def set_immutable(self, path: str) -> None: ...

    def clear_immutable(self, path: str) -> None: ...
