#!/usr/bin/env python3
"""
PaX Feature Registry

Static, ordered table mapping each hardening feature to the pair of
system namespace attributes that control it. The order of the table
drives the order of every report; it has no other meaning.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from collections.abc import Iterable

from ..core.constants import ATTRIBUTE_PREFIX
from ..core.errors import UnknownFeature
from ..domain.feature_state import FeatureDescriptor


def _pax_feature(name: str) -> FeatureDescriptor:
    return FeatureDescriptor(
        name=name,
        disable_attr=f"{ATTRIBUTE_PREFIX}no{name}",
        enable_attr=f"{ATTRIBUTE_PREFIX}{name}",
    )


PAX_FEATURES: tuple[FeatureDescriptor, ...] = (
    _pax_feature("aslr"),
    _pax_feature("segvguard"),
    _pax_feature("pageexec"),
    _pax_feature("mprotect"),
    _pax_feature("shlibrandom"),
    _pax_feature("disallow_map32bit"),
)


class FeatureRegistry:
    """
    Immutable collection of feature descriptors.

    Construction validates that feature names are unique and that every
    attribute name is non-empty and used by exactly one descriptor.

    Example:
        >>> registry = FeatureRegistry(PAX_FEATURES)
        >>> registry.lookup_by_name("aslr").enable_attr
        'hbsd.pax.aslr'
    """

    def __init__(self, descriptors: Iterable[FeatureDescriptor]):
        self._descriptors = tuple(descriptors)
        self._by_name: dict[str, FeatureDescriptor] = {}
        self._validate()

    def _validate(self) -> None:
        seen_attributes: set[str] = set()
        for descriptor in self._descriptors:
            if not descriptor.name:
                raise ValueError("feature name must be non-empty")
            if descriptor.name in self._by_name:
                raise ValueError(f"duplicate feature name: {descriptor.name}")
            for attribute in descriptor.attributes():
                if not attribute:
                    raise ValueError(f"{descriptor.name}: attribute name must be non-empty")
                if attribute in seen_attributes:
                    raise ValueError(f"{descriptor.name}: attribute {attribute} already registered")
                seen_attributes.add(attribute)
            self._by_name[descriptor.name] = descriptor

    def lookup_by_name(self, name: str) -> FeatureDescriptor:
        """Return the descriptor for a feature name or raise UnknownFeature."""
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownFeature(name, self.names()) from None

    def all(self) -> tuple[FeatureDescriptor, ...]:
        return self._descriptors

    def names(self) -> tuple[str, ...]:
        return tuple(descriptor.name for descriptor in self._descriptors)


_DEFAULT_REGISTRY: FeatureRegistry | None = None


def default_registry() -> FeatureRegistry:
    """Return the shared registry of HardenedBSD PaX features."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = FeatureRegistry(PAX_FEATURES)
    return _DEFAULT_REGISTRY
