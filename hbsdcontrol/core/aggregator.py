#!/usr/bin/env python3
"""
hbsdcontrol Feature State Aggregator

Runs the query path (list, decode, match, get, reconcile) for one file and
drives the mutation paths that enable, disable or reset features by writing
or deleting their attribute pairs.

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

from __future__ import annotations

from ..domain.feature_state import (
    FeatureDescriptor,
    FeatureState,
    Polarity,
    RawAttributeState,
    ResolvedState,
)
from ..interfaces import AttributeStoreInterface
from ..modules.attr_list_decoder import decode
from ..modules.state_reconciler import resolve_feature
from ..registry.attribute_matcher import AttributeMatcher
from ..registry.feature_registry import FeatureRegistry, default_registry
from ..utils.logger import get_logger
from .constants import VALUE_DISABLED, VALUE_ENABLED
from .errors import AttributeStoreFailure
from .options import ControlOptions

logger = get_logger(__name__)


class FeatureStateAggregator:
    """
    Per-file feature state queries and mutations.

    Nothing is cached between calls: every query re-reads the attribute
    store, so an external writer racing with a query can only change which
    of ENABLED, DISABLED, CONFLICT or UNSET is reported.

    Attributes:
        store: Attribute store the engine reads and writes through
        registry: Feature registry, the PaX table by default
        options: Flags for this invocation
    """

    def __init__(
        self,
        store: AttributeStoreInterface,
        registry: FeatureRegistry | None = None,
        options: ControlOptions | None = None,
    ):
        self.store = store
        self.registry = registry or default_registry()
        self.options = options or ControlOptions()
        self.matcher = AttributeMatcher(self.registry)

    # ------------------------------------------------------------------
    # Query path
    # ------------------------------------------------------------------

    def query(self, path: str) -> list[FeatureState]:
        """
        Report every feature that has at least one attribute stored.

        Args:
            path: File to inspect

        Returns:
            FeatureState records in registry order; features with neither
            attribute present are omitted

        Raises:
            MalformedAttributeList: The listing buffer could not be decoded
            MalformedAttributeValue: A matched attribute holds neither 0 nor 1
            AttributeStoreFailure: A list or get call failed
        """
        buffer = self.store.list(path)
        if self.options.dump_buffers:
            logger.debug(f"{path}: raw attribute listing ({len(buffer)} bytes) {buffer.hex()}")

        matched: dict[str, set[Polarity]] = {}
        for name in decode(buffer):
            match = self.matcher.match(name)
            if match is None:
                logger.debug(f"{path}: ignoring unrelated attribute {name!r}")
                continue
            logger.info(f"{path}: found attribute: {name}")
            matched.setdefault(match.descriptor.name, set()).add(match.polarity)

        states: list[FeatureState] = []
        for descriptor in self.registry.all():
            polarities = matched.get(descriptor.name)
            if not polarities:
                continue
            state = self._read_feature(path, descriptor, polarities)
            # Both attributes vanished between list and get
            if state.resolved is ResolvedState.UNSET:
                continue
            states.append(state)
        return states

    def status(self, path: str, feature: str) -> FeatureState:
        """
        Report a single feature, reading both attributes directly.

        Returns a FeatureState resolved to UNSET when neither attribute is
        stored.

        Raises:
            UnknownFeature: The feature is not in the registry
        """
        descriptor = self.registry.lookup_by_name(feature)
        return self._read_feature(path, descriptor, set(Polarity))

    def _read_feature(
        self, path: str, descriptor: FeatureDescriptor, polarities: set[Polarity]
    ) -> FeatureState:
        raw: dict[Polarity, RawAttributeState] = {}
        for polarity in Polarity:
            name = descriptor.attribute_for(polarity)
            if polarity in polarities:
                raw[polarity] = RawAttributeState.from_value(name, self.store.get(path, name))
            else:
                raw[polarity] = RawAttributeState.absent(name)
        state = resolve_feature(descriptor.name, raw[Polarity.DISABLE], raw[Polarity.ENABLE])
        logger.debug(f"{path}: {descriptor.name} resolved to {state.resolved.value}")
        return state

    # ------------------------------------------------------------------
    # Mutation path
    # ------------------------------------------------------------------

    def set_feature_state(self, path: str, feature: str, enabled: bool) -> None:
        """
        Enable or disable a feature by writing both of its attributes.

        The disable attribute receives the complement of the requested state
        and the enable attribute the state itself. Both writes are attempted
        even if the first fails; a partial failure leaves a pair the next
        query reports as CONFLICT.

        Raises:
            UnknownFeature: The feature is not in the registry
            AttributeStoreFailure: Either write failed
        """
        descriptor = self.registry.lookup_by_name(feature)
        logger.info(f"{'enable' if enabled else 'disable'} {descriptor.name} on {path}")

        enable_value = VALUE_ENABLED if enabled else VALUE_DISABLED
        disable_value = VALUE_DISABLED if enabled else VALUE_ENABLED
        writes = (
            (descriptor.disable_attr, disable_value),
            (descriptor.enable_attr, enable_value),
        )

        failures: list[AttributeStoreFailure] = []
        for attribute, value in writes:
            try:
                self.store.set(path, attribute, value)
            except AttributeStoreFailure as exc:
                logger.error(str(exc))
                failures.append(exc)

        if failures:
            raise AttributeStoreFailure.combine("set", path, failures)

    def reset_feature(self, path: str, feature: str) -> None:
        """
        Delete both attributes of a feature, leaving it UNSET.

        Deleting an attribute that was never stored is not an error. Both
        deletes are attempted even if the first fails.

        Raises:
            UnknownFeature: The feature is not in the registry
            AttributeStoreFailure: Either delete failed
        """
        descriptor = self.registry.lookup_by_name(feature)
        logger.info(f"reset {descriptor.name} on {path}")

        failures: list[AttributeStoreFailure] = []
        for attribute in descriptor.attributes():
            try:
                self.store.delete(path, attribute)
            except AttributeStoreFailure as exc:
                logger.error(str(exc))
                failures.append(exc)

        if failures:
            raise AttributeStoreFailure.combine("delete", path, failures)

    def reset_all(self, path: str, keep_going: bool | None = None) -> None:
        """
        Reset every registered feature on a file.

        Args:
            path: File to reset
            keep_going: Continue past failing features; defaults to the
                keep_going option

        Raises:
            AttributeStoreFailure: The first failure, or every failure when
                keep_going is set
        """
        if keep_going is None:
            keep_going = self.options.keep_going

        failures: list[AttributeStoreFailure] = []
        for descriptor in self.registry.all():
            try:
                self.reset_feature(path, descriptor.name)
            except AttributeStoreFailure as exc:
                if not keep_going:
                    raise
                failures.append(exc)

        if failures:
            raise AttributeStoreFailure.combine("reset-all", path, failures)
