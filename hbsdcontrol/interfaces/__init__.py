"""Protocol interfaces for hbsdcontrol collaborators."""

from .attribute_store import AttributeStoreInterface, FileFlagsInterface

__all__ = ["AttributeStoreInterface", "FileFlagsInterface"]
