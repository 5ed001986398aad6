"""Map raw attribute names to the feature and polarity they control."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.feature_state import FeatureDescriptor, Polarity
from .feature_registry import FeatureRegistry


@dataclass(frozen=True)
class AttributeMatch:
    descriptor: FeatureDescriptor
    polarity: Polarity


class AttributeMatcher:
    """
    Exact, case-sensitive attribute name lookup against a registry.

    Names unrelated to the registry are ignored rather than reported, since
    other tools share the system namespace.
    """

    def __init__(self, registry: FeatureRegistry):
        self.registry = registry
        self._index: dict[str, AttributeMatch] = {}
        for descriptor in registry.all():
            for polarity in Polarity:
                self._index[descriptor.attribute_for(polarity)] = AttributeMatch(
                    descriptor, polarity
                )

    def match(self, attribute_name: str) -> AttributeMatch | None:
        return self._index.get(attribute_name)
