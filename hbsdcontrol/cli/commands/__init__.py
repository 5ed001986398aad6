#!/usr/bin/env python3
"""
hbsdcontrol CLI Commands Package

Command Pattern implementation for the pax subcommands. Each command
encapsulates one operation and shares a CommandContext.
"""

from .base import Command, CommandContext
from .feature_command import FeatureCommand
from .report_command import ListCommand, StatusCommand
from .reset_command import ResetAllCommand, ResetCommand
from .version_command import VersionCommand

__all__ = [
    "Command",
    "CommandContext",
    "FeatureCommand",
    "ListCommand",
    "ResetAllCommand",
    "ResetCommand",
    "StatusCommand",
    "VersionCommand",
]
