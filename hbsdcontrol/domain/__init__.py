"""Domain models for PaX feature state."""

from .feature_state import (
    AttributeEntry,
    FeatureDescriptor,
    FeatureState,
    Polarity,
    RawAttributeState,
    ResolvedState,
)

__all__ = [
    "AttributeEntry",
    "FeatureDescriptor",
    "FeatureState",
    "Polarity",
    "RawAttributeState",
    "ResolvedState",
]
