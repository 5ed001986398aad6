"""Run options threaded through commands and the feature state engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .constants import MAX_VERBOSITY


@dataclass(frozen=True)
class ControlOptions:
    """
    Flags controlling one hbsdcontrol invocation.

    Attributes:
        verbose: Verbosity level, 0 to 3
        force: Clear the system immutable flag before changing attributes
        immutable: Set the system immutable flag after changing attributes
        keep_going: Continue past per-item failures in batch operations
    """

    verbose: int = 0
    force: bool = False
    immutable: bool = False
    keep_going: bool = False

    def __post_init__(self):
        if self.verbose < 0:
            raise ValueError("verbose must be non-negative")
        if self.verbose > MAX_VERBOSITY:
            object.__setattr__(self, "verbose", MAX_VERBOSITY)

    @property
    def dump_buffers(self) -> bool:
        """Raw attribute listings are logged at the highest verbosity only."""
        return self.verbose >= MAX_VERBOSITY


def build_control_options(
    verbose: int = 0,
    force: bool = False,
    immutable: bool = False,
    keep_going: bool | None = None,
    config: Any = None,
) -> ControlOptions:
    """
    Build options from CLI flags, falling back to configuration defaults.

    keep_going is None when neither -k nor --no-keep-going was given; the
    configured value applies then.
    """
    if keep_going is None:
        keep_going = config.keep_going if config is not None else False
    return ControlOptions(
        verbose=min(verbose, MAX_VERBOSITY),
        force=force,
        immutable=immutable,
        keep_going=keep_going,
    )
