#!/usr/bin/env python3
"""
hbsdcontrol CLI Commands - Enable / Disable

Writes both attributes of a feature on every target file.

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

from typing import Any

from rich.markup import escape

from .base import Command


class FeatureCommand(Command):
    """
    Command for enabling or disabling one feature.

    Expected args:
        feature: Feature name
        files: Target file paths
        enabled: True for enable, False for disable
    """

    def execute(self, args: dict[str, Any]) -> int:
        feature = args["feature"]
        enabled = bool(args["enabled"])
        aggregator = self.context.aggregator()
        # Reject unknown features before touching any file
        aggregator.registry.lookup_by_name(feature)

        def apply(path: str) -> None:
            self._mutate(path, lambda: aggregator.set_feature_state(path, feature, enabled))
            if not self.context.options.verbose:
                return
            verb = "enabled" if enabled else "disabled"
            self.context.console.print(f"[green]{feature} {verb} on {escape(path)}[/green]")

        return self._for_each_file(args["files"], apply)
