#!/usr/bin/env python3
"""Fold a feature's two raw attribute states into one resolved state."""

from __future__ import annotations

from ..domain.feature_state import FeatureState, RawAttributeState, ResolvedState

# (disable, enable) -> resolved. Both absent resolves to CONFLICT: no
# authoritative value can be derived from missing evidence. Older releases
# reported DISABLED for this row.
_RESOLUTION_TABLE: dict[tuple[bool, bool], ResolvedState] = {
    (False, False): ResolvedState.CONFLICT,
    (False, True): ResolvedState.ENABLED,
    (True, False): ResolvedState.DISABLED,
    (True, True): ResolvedState.CONFLICT,
}


def reconcile(disable_raw: bool, enable_raw: bool) -> ResolvedState:
    return _RESOLUTION_TABLE[(bool(disable_raw), bool(enable_raw))]


def resolve_feature(
    feature: str, disable: RawAttributeState, enable: RawAttributeState
) -> FeatureState:
    """Build a FeatureState; UNSET when neither attribute is stored."""
    if not disable.present and not enable.present:
        resolved = ResolvedState.UNSET
    else:
        resolved = reconcile(disable.state, enable.state)
    return FeatureState(feature=feature, disable=disable, enable=enable, resolved=resolved)
