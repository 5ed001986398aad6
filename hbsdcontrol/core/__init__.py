"""Core constants, errors and run options for hbsdcontrol."""

from .errors import (
    AttributeStoreFailure,
    FileNotFound,
    HbsdControlError,
    MalformedAttributeList,
    MalformedAttributeValue,
    PrivilegeRequired,
    UnknownFeature,
)
from .options import ControlOptions, build_control_options

__all__ = [
    "AttributeStoreFailure",
    "ControlOptions",
    "FileNotFound",
    "HbsdControlError",
    "MalformedAttributeList",
    "MalformedAttributeValue",
    "PrivilegeRequired",
    "UnknownFeature",
    "build_control_options",
]
