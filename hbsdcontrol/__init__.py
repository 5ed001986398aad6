#!/usr/bin/env python3
"""
hbsdcontrol - HardenedBSD PaX feature attribute control

Reads, reconciles and writes the pairs of system namespace extended
attributes that toggle per-file exploit mitigations.

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __url__, __version__

__description__ = "HardenedBSD PaX feature attribute control"

from .core.aggregator import FeatureStateAggregator
from .domain.feature_state import FeatureDescriptor, FeatureState, Polarity, ResolvedState
from .modules.state_reconciler import reconcile
from .registry.feature_registry import PAX_FEATURES, FeatureRegistry, default_registry

__all__ = [
    "FeatureDescriptor",
    "FeatureRegistry",
    "FeatureState",
    "FeatureStateAggregator",
    "PAX_FEATURES",
    "Polarity",
    "ResolvedState",
    "default_registry",
    "reconcile",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "__description__",
]
