"""Feature registry and attribute matching."""

from .attribute_matcher import AttributeMatch, AttributeMatcher
from .feature_registry import PAX_FEATURES, FeatureRegistry, default_registry

__all__ = [
    "AttributeMatch",
    "AttributeMatcher",
    "FeatureRegistry",
    "PAX_FEATURES",
    "default_registry",
]
