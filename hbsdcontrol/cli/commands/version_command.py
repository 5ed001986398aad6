#!/usr/bin/env python3
"""
hbsdcontrol CLI Commands - Version Command
"""

from typing import Any

from rich.console import Console

from ...__version__ import __author__, __license__, __url__, __version__
from ..display import console as default_console
from .base import Command


class VersionCommand(Command):
    """
    Command for displaying version information.

    Needs no attribute store, so it only borrows a console.
    """

    def __init__(self, output: Console | None = None):
        super().__init__(None)
        self._output = output or default_console

    def execute(self, _args: dict[str, Any]) -> int:
        self._output.print(
            f"[bold cyan]hbsdcontrol[/bold cyan] version [bold green]{__version__}[/bold green]"
        )
        self._output.print(f"Author: {__author__}")
        self._output.print(f"License: {__license__}")
        self._output.print(f"Repository: {__url__}")
        return 0
