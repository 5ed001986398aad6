#!/usr/bin/env python3
"""
hbsdcontrol CLI - Command Line Interface

This module provides the Click-based CLI entry point for hbsdcontrol.
Command execution logic lives in the command classes under cli.commands.

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

import sys
from dataclasses import dataclass
from typing import Any

import click

from .cli.commands import (
    Command,
    CommandContext,
    FeatureCommand,
    ListCommand,
    ResetAllCommand,
    ResetCommand,
    StatusCommand,
    VersionCommand,
)
from .cli.display import console, handle_main_error
from .cli.validators import check_privileges
from .config import Config
from .core.constants import MAX_VERBOSITY
from .core.errors import HbsdControlError
from .core.options import build_control_options


@dataclass
class CLIArgs:
    verbose: int
    force: bool
    immutable: bool
    keep_going: bool | None
    config: str | None
    output_json: bool
    version: bool


FILES_ARGUMENT = click.argument("files", nargs=-1, required=True, type=click.Path())
FEATURE_ARGUMENT = click.argument("feature")


@click.group(invoke_without_command=True)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help=f"Increase verbosity (repeatable up to {MAX_VERBOSITY} times)",
)
@click.option("-f", "--force", is_flag=True, help="Clear the immutable flag before changing attributes")
@click.option("-i", "--immutable", is_flag=True, help="Mark files immutable after changing attributes")
@click.option(
    "-k/-K",
    "--keep-going/--no-keep-going",
    default=None,
    help="Continue past per-file failures (default from config)",
)
@click.option("--config", type=click.Path(dir_okay=False), help="Custom config file path")
@click.option("-j", "--json", "output_json", is_flag=True, help="Print reports as JSON")
@click.option("--version", is_flag=True, help="Show version information and exit")
@click.pass_context
def cli(ctx: click.Context, **kwargs: Any):
    """hbsdcontrol - manage HardenedBSD PaX feature attributes on files."""
    ctx.ensure_object(dict)
    args = CLIArgs(**kwargs)
    ctx.obj["args"] = args

    if args.version:
        ctx.exit(VersionCommand(console).execute({}))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


@cli.group()
def pax():
    """Enable, disable, reset and inspect PaX features."""


@pax.command("enable")
@FEATURE_ARGUMENT
@FILES_ARGUMENT
@click.pass_context
def enable(ctx: click.Context, feature: str, files: tuple[str, ...]):
    """Enable FEATURE on each FILE."""
    _run(ctx, FeatureCommand, {"feature": feature, "files": files, "enabled": True})


@pax.command("disable")
@FEATURE_ARGUMENT
@FILES_ARGUMENT
@click.pass_context
def disable(ctx: click.Context, feature: str, files: tuple[str, ...]):
    """Disable FEATURE on each FILE."""
    _run(ctx, FeatureCommand, {"feature": feature, "files": files, "enabled": False})


@pax.command("reset")
@FEATURE_ARGUMENT
@FILES_ARGUMENT
@click.pass_context
def reset(ctx: click.Context, feature: str, files: tuple[str, ...]):
    """Remove FEATURE's attributes from each FILE."""
    _run(ctx, ResetCommand, {"feature": feature, "files": files})


@pax.command("reset-all")
@FILES_ARGUMENT
@click.pass_context
def reset_all(ctx: click.Context, files: tuple[str, ...]):
    """Remove every feature attribute from each FILE."""
    _run(ctx, ResetAllCommand, {"files": files})


@pax.command("list")
@FILES_ARGUMENT
@click.pass_context
def list_features(ctx: click.Context, files: tuple[str, ...]):
    """Report every feature set on each FILE."""
    _run(ctx, ListCommand, {"files": files})


@pax.command("status")
@FEATURE_ARGUMENT
@FILES_ARGUMENT
@click.pass_context
def status(ctx: click.Context, feature: str, files: tuple[str, ...]):
    """Report FEATURE's state on each FILE."""
    _run(ctx, StatusCommand, {"feature": feature, "files": files})


def _build_context(args: CLIArgs, obj: dict[str, Any]) -> CommandContext:
    """Construct a CommandContext from CLI arguments and injected collaborators."""
    config = Config(args.config)
    options = build_control_options(
        verbose=args.verbose,
        force=args.force,
        immutable=args.immutable,
        keep_going=args.keep_going,
        config=config,
    )
    return CommandContext.create(
        config=config,
        options=options,
        store=obj.get("store"),
        flags=obj.get("flags"),
        output_format="json" if args.output_json else None,
    )


def _run(ctx: click.Context, command_cls: type[Command], command_args: dict[str, Any]) -> None:
    """Check privileges, build the context and dispatch to a command."""
    obj = ctx.find_root().obj
    args: CLIArgs = obj["args"]
    try:
        check_privileges()
        command = command_cls(_build_context(args, obj))
        exit_code = command.execute(command_args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(1)
    except HbsdControlError as e:
        handle_main_error(e, args.verbose >= 2)
    else:
        ctx.exit(exit_code)
