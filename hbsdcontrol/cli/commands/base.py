#!/usr/bin/env python3
"""
hbsdcontrol CLI Commands - Base Abstractions

Command Pattern implementation for hbsdcontrol CLI commands.

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

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from rich.console import Console

from ...adapters import ExtattrAdapter, FileFlagsAdapter
from ...config import Config
from ...core.aggregator import FeatureStateAggregator
from ...core.constants import EXIT_FAILURE, EXIT_SUCCESS
from ...core.errors import HbsdControlError
from ...core.options import ControlOptions
from ...interfaces import AttributeStoreInterface, FileFlagsInterface
from ...utils.logger import configure_logging_levels, setup_logger
from ..display import console as default_console
from ..display import print_error
from ..validators import validate_target_file


@dataclass
class CommandContext:
    """
    Shared context for all commands.

    Attributes:
        console: Rich console for formatted output
        logger: Logger instance for command execution logging
        config: Application configuration object
        options: Flags for this invocation
        store: Attribute store the commands operate on
        flags: File flag adapter used by -f and -i
        output_format: table or json
    """

    console: Console
    logger: Any
    config: Config
    options: ControlOptions
    store: AttributeStoreInterface
    flags: FileFlagsInterface
    output_format: str = "table"

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        options: ControlOptions | None = None,
        store: AttributeStoreInterface | None = None,
        flags: FileFlagsInterface | None = None,
        output_format: str | None = None,
    ) -> "CommandContext":
        """
        Factory method to create a CommandContext with proper initialization.

        Args:
            config: Optional configuration object
            options: Invocation flags, defaults when omitted
            store: Attribute store, the libc extattr adapter when omitted
            flags: File flag adapter, chflags(2) based when omitted
            output_format: Overrides the configured output format

        Returns:
            Configured CommandContext instance
        """
        config = config or Config()
        options = options or ControlOptions()
        logger = setup_logger(log_file=config.log_file)
        configure_logging_levels(options.verbose)

        if store is None:
            store = ExtattrAdapter(list_buffer_limit=config.list_buffer_limit)

        return cls(
            console=default_console,
            logger=logger,
            config=config,
            options=options,
            store=store,
            flags=flags or FileFlagsAdapter(),
            output_format=output_format or config.output_format,
        )

    def aggregator(self) -> FeatureStateAggregator:
        return FeatureStateAggregator(self.store, options=self.options)


class Command(ABC):
    """
    Abstract base class for all CLI commands.

    Each command encapsulates one pax subcommand and is executed once per
    invocation over one or more target files.
    """

    def __init__(self, context: CommandContext | None = None):
        self._context = context

    @abstractmethod
    def execute(self, args: dict[str, Any]) -> int:
        """
        Execute the command with provided arguments.

        Args:
            args: Dictionary of command arguments (from Click)

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        pass

    @property
    def context(self) -> CommandContext:
        if self._context is None:
            self._context = CommandContext.create()
        return self._context

    @context.setter
    def context(self, value: CommandContext) -> None:
        self._context = value

    def _for_each_file(self, files: Iterable[str], action: Callable[[str], None]) -> int:
        """
        Apply an action to every target file.

        Stops at the first failure unless keep-going is set; in that case
        every file is attempted and the exit code still reports the failure.
        """
        failed = False
        for path in files:
            try:
                validate_target_file(path)
                action(path)
            except HbsdControlError as exc:
                failed = True
                print_error(str(exc))
                self.context.logger.debug(f"{path}: {type(exc).__name__}", exc_info=True)
                if not self.context.options.keep_going:
                    break
        return EXIT_FAILURE if failed else EXIT_SUCCESS

    def _mutate(self, path: str, change: Callable[[], None]) -> None:
        """Run an attribute change honouring the force and immutable flags."""
        options = self.context.options
        flags = self.context.flags
        cleared = False
        if options.force and flags.is_immutable(path):
            flags.clear_immutable(path)
            cleared = True
        try:
            change()
        except HbsdControlError:
            # A failed change must not leave a locked file unlocked
            if cleared:
                flags.set_immutable(path)
            raise
        if options.immutable:
            flags.set_immutable(path)
