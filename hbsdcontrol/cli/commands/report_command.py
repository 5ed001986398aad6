#!/usr/bin/env python3
"""
hbsdcontrol CLI Commands - List / Status

Query commands rendering feature state reports as a table or JSON.

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

from ...domain.feature_state import FeatureState
from ..display import display_feature_states, display_json_report
from .base import Command


class _ReportCommand(Command):
    """
    Shared rendering for query commands.

    Table output is printed as each file is read; JSON output is collected
    and printed once so that it forms a single document.
    """

    def _report(self, files: list[str], read) -> int:
        reports: list[tuple[str, list[FeatureState]]] = []
        as_json = self.context.output_format == "json"

        def apply(path: str) -> None:
            states = read(path)
            if as_json:
                reports.append((path, states))
            else:
                display_feature_states(path, states, self.context.console)

        exit_code = self._for_each_file(files, apply)
        if as_json:
            display_json_report(reports, self.context.config.json_indent, self.context.console)
        return exit_code


class ListCommand(_ReportCommand):
    """Report every feature with stored attributes on each target file."""

    def execute(self, args: dict[str, Any]) -> int:
        aggregator = self.context.aggregator()
        return self._report(list(args["files"]), aggregator.query)


class StatusCommand(_ReportCommand):
    """Report one feature, including UNSET, on each target file."""

    def execute(self, args: dict[str, Any]) -> int:
        feature = args["feature"]
        aggregator = self.context.aggregator()
        aggregator.registry.lookup_by_name(feature)
        return self._report(
            list(args["files"]), lambda path: [aggregator.status(path, feature)]
        )
