#!/usr/bin/env python3
"""
Attribute listing decoder.

Parses the buffer returned by extattr_list_file(2): a run of entries, each
one length byte followed by that many bytes of attribute name. The buffer
carries no entry count and no terminators; it ends at the byte count the
listing call reported.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.constants import LIST_LENGTH_PREFIX_BYTES, MAX_ATTRIBUTE_NAME_LENGTH
from ..core.errors import MalformedAttributeList
from ..domain.feature_state import AttributeEntry

NAME_ENCODING = "utf-8"
NAME_ERRORS = "surrogateescape"


class AttributeListReader:
    """Bounds-checked cursor over an attribute listing buffer."""

    def __init__(self, buffer: bytes | bytearray | memoryview):
        self._data = memoryview(bytes(buffer))
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def read_length(self) -> int:
        if self.remaining < LIST_LENGTH_PREFIX_BYTES:
            raise MalformedAttributeList(
                f"missing length byte at offset {self._pos}", offset=self._pos
            )
        length = int.from_bytes(
            self._data[self._pos : self._pos + LIST_LENGTH_PREFIX_BYTES], "big"
        )
        self._pos += LIST_LENGTH_PREFIX_BYTES
        return length

    def read(self, size: int) -> bytes:
        if size > self.remaining:
            raise MalformedAttributeList(
                f"entry at offset {self._pos - LIST_LENGTH_PREFIX_BYTES} claims {size} bytes, "
                f"only {self.remaining} remain",
                offset=self._pos - LIST_LENGTH_PREFIX_BYTES,
            )
        chunk = self._data[self._pos : self._pos + size].tobytes()
        self._pos += size
        return chunk


def decode_entries(buffer: bytes | bytearray | memoryview) -> list[AttributeEntry]:
    """Decode a listing into (name, length) entries, in buffer order."""
    reader = AttributeListReader(buffer)
    entries: list[AttributeEntry] = []
    while not reader.at_end():
        length = reader.read_length()
        raw_name = reader.read(length)
        entries.append(AttributeEntry(raw_name.decode(NAME_ENCODING, NAME_ERRORS), length))
    return entries


def decode(buffer: bytes | bytearray | memoryview) -> list[str]:
    """Decode a listing into its attribute names, in buffer order."""
    return [entry.name for entry in decode_entries(buffer)]


def encode(names: Iterable[str]) -> bytes:
    """Encode attribute names into the length-prefixed listing format."""
    out = bytearray()
    for name in names:
        raw = name.encode(NAME_ENCODING, NAME_ERRORS)
        if len(raw) > MAX_ATTRIBUTE_NAME_LENGTH:
            raise ValueError(
                f"attribute name too long ({len(raw)} > {MAX_ATTRIBUTE_NAME_LENGTH}): {name!r}"
            )
        out.append(len(raw))
        out += raw
    return bytes(out)
