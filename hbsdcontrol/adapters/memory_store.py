#!/usr/bin/env python3
"""In-memory attribute store producing the extattr listing format."""

from __future__ import annotations

from ..modules.attr_list_decoder import encode


class MemoryAttributeStore:
    """
    Dictionary backed AttributeStoreInterface implementation.

    Values are kept as raw bytes so that malformed or contradictory data
    written by other tools can be seeded with put_raw().
    """

    def __init__(self, files: dict[str, dict[str, bytes]] | None = None):
        self._files: dict[str, dict[str, bytes]] = {
            path: dict(attrs) for path, attrs in (files or {}).items()
        }

    def list(self, path: str) -> bytes:
        return encode(self._files.get(path, {}).keys())

    def get(self, path: str, name: str) -> bytes | None:
        return self._files.get(path, {}).get(name)

    def set(self, path: str, name: str, value: int) -> None:
        self.put_raw(path, name, str(int(value)).encode("ascii"))

    def delete(self, path: str, name: str) -> None:
        self._files.get(path, {}).pop(name, None)

    def put_raw(self, path: str, name: str, value: bytes) -> None:
        self._files.setdefault(path, {})[name] = bytes(value)

    def attributes(self, path: str) -> dict[str, bytes]:
        """Snapshot of the attributes stored for a path."""
        return dict(self._files.get(path, {}))
