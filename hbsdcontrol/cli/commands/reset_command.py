#!/usr/bin/env python3
"""
hbsdcontrol CLI Commands - Reset / Reset All

Deletes feature attributes so the features fall back to the system default.
"""

from typing import Any

from .base import Command


class ResetCommand(Command):
    """Delete both attributes of one feature on every target file."""

    def execute(self, args: dict[str, Any]) -> int:
        feature = args["feature"]
        aggregator = self.context.aggregator()
        aggregator.registry.lookup_by_name(feature)

        def apply(path: str) -> None:
            self._mutate(path, lambda: aggregator.reset_feature(path, feature))

        return self._for_each_file(args["files"], apply)


class ResetAllCommand(Command):
    """Delete the attributes of every registered feature on every target file."""

    def execute(self, args: dict[str, Any]) -> int:
        aggregator = self.context.aggregator()

        def apply(path: str) -> None:
            self._mutate(path, lambda: aggregator.reset_all(path))

        return self._for_each_file(args["files"], apply)
