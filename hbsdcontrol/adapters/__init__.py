"""Attribute store and file flag adapters."""

from .extattr_adapter import ExtattrAdapter
from .file_flags import FileFlagsAdapter
from .memory_store import MemoryAttributeStore

__all__ = ["ExtattrAdapter", "FileFlagsAdapter", "MemoryAttributeStore"]
