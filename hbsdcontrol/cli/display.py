#!/usr/bin/env python3
"""
hbsdcontrol CLI Display Module

Rich tables and JSON rendering for feature state reports, plus the
top-level error printer.
"""

import sys
import traceback
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..core.constants import EXIT_FAILURE
from ..domain.feature_state import FeatureState, ResolvedState

console = Console()
err_console = Console(stderr=True)

STATE_STYLES = {
    ResolvedState.ENABLED: "[green]enabled[/green]",
    ResolvedState.DISABLED: "[yellow]disabled[/yellow]",
    ResolvedState.CONFLICT: "[bold red]conflict[/bold red]",
    ResolvedState.UNSET: "[dim]unset[/dim]",
}
NOT_SET = "[dim]-[/dim]"


def _format_raw(present: bool, value: bytes | None) -> str:
    if not present:
        return NOT_SET
    return (value or b"").decode("ascii", errors="replace")


def create_feature_table(path: str) -> Table:
    """Create the per-file feature state table"""
    table = Table(title=Text(path), show_header=True, expand=False)
    table.add_column("Feature", style="cyan", no_wrap=True)
    table.add_column("State", no_wrap=True)
    table.add_column("Disable attribute", style="dim")
    table.add_column("Value", justify="center")
    table.add_column("Enable attribute", style="dim")
    table.add_column("Value", justify="center")
    return table


def display_feature_states(
    path: str, states: list[FeatureState], output: Console | None = None
) -> None:
    """Print one file's feature states as a table"""
    out = output or console
    if not states:
        out.print(f"[dim]{escape(path)}: no PaX feature attributes set[/dim]", soft_wrap=True)
        return

    table = create_feature_table(path)
    for state in states:
        table.add_row(
            state.feature,
            STATE_STYLES[state.resolved],
            state.disable.name,
            _format_raw(state.disable.present, state.disable.value),
            state.enable.name,
            _format_raw(state.enable.present, state.enable.value),
        )
    out.print(table)


def build_json_report(reports: list[tuple[str, list[FeatureState]]]) -> list[dict[str, Any]]:
    return [
        {"file": path, "features": [state.to_dict() for state in states]}
        for path, states in reports
    ]


def display_json_report(
    reports: list[tuple[str, list[FeatureState]]],
    indent: int = 2,
    output: Console | None = None,
) -> None:
    out = output or console
    out.print_json(data=build_json_report(reports), indent=indent, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)


def handle_main_error(e: Exception, verbose: bool) -> None:
    """
    Handle errors escaping a command.

    Args:
        e: Exception that occurred
        verbose: Print the traceback as well
    """
    print_error(str(e))
    if verbose:
        traceback.print_exc()
    sys.exit(EXIT_FAILURE)
