"""Typed models for PaX feature descriptors and their resolved state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.constants import VALID_STATE_VALUES, VALUE_ENABLED
from ..core.errors import MalformedAttributeValue


class Polarity(Enum):
    """Which of a feature's two attributes an attribute name stands for."""

    DISABLE = "disable"
    ENABLE = "enable"


class ResolvedState(Enum):
    """
    Resolved state of one feature on one file.

    UNSET means neither attribute is stored; the reconciler never returns it.
    """

    ENABLED = "enabled"
    DISABLED = "disabled"
    CONFLICT = "conflict"
    UNSET = "unset"


@dataclass(frozen=True)
class FeatureDescriptor:
    """A feature name and the two attributes that control it."""

    name: str
    disable_attr: str
    enable_attr: str

    def attribute_for(self, polarity: Polarity) -> str:
        if polarity is Polarity.DISABLE:
            return self.disable_attr
        return self.enable_attr

    def attributes(self) -> tuple[str, str]:
        return (self.disable_attr, self.enable_attr)


@dataclass(frozen=True)
class AttributeEntry:
    """One entry of a decoded attribute listing."""

    name: str
    length: int


@dataclass(frozen=True)
class RawAttributeState:
    """Presence and raw stored value of a single attribute."""

    name: str
    present: bool = False
    value: bytes | None = None

    @classmethod
    def absent(cls, name: str) -> "RawAttributeState":
        return cls(name=name)

    @classmethod
    def from_value(cls, name: str, value: bytes | None) -> "RawAttributeState":
        if value is None:
            return cls.absent(name)
        return cls(name=name, present=True, value=bytes(value))

    @property
    def int_value(self) -> int | None:
        """The stored digit as an integer, None when absent."""
        if not self.present:
            return None
        if not self.value:
            raise MalformedAttributeValue(self.name, self.value or b"")
        state = self.value[0] - ord("0")
        if state not in VALID_STATE_VALUES:
            raise MalformedAttributeValue(self.name, self.value)
        return state

    @property
    def state(self) -> bool:
        return self.int_value == VALUE_ENABLED

    def to_dict(self) -> dict[str, Any]:
        return {
            "attribute": self.name,
            "present": self.present,
            "value": self.value.decode("ascii", errors="replace") if self.value is not None else None,
        }


@dataclass(frozen=True)
class FeatureState:
    """Resolved state of one feature together with the evidence it came from."""

    feature: str
    disable: RawAttributeState
    enable: RawAttributeState
    resolved: ResolvedState

    @property
    def disable_present(self) -> bool:
        return self.disable.present

    @property
    def enable_present(self) -> bool:
        return self.enable.present

    def to_dict(self) -> dict[str, Any]:
        return {
            "feature": self.feature,
            "state": self.resolved.value,
            "disable": self.disable.to_dict(),
            "enable": self.enable.to_dict(),
        }
