# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render the detected toolchain as a table."""

from __future__ import annotations

from rich import box
from rich.table import Table

from ..console import get_console_manager
from ..errors import ToolchainError
from ..logging import fail, warn
from ..query import build_triple
from ._shared import CLIContext, ExitCode


def run_show(state: CLIContext) -> ExitCode:
    """Invoke the compiler once and print version, channel and commit date."""

    source = state.source()
    try:
        output = source.inspect()
    except ToolchainError as exc:
        fail(str(exc), use_emoji=state.use_emoji, use_color=state.use_color)
        return ExitCode.UNKNOWN

    detected = build_triple(output)
    table = Table(title="Toolchain", box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")
    table.add_row("Compiler", " or ".join(state.config.candidates()))
    table.add_row("Version", output.version or "-")
    table.add_row("Commit date", output.date or "-")
    if detected is not None:
        _, channel, _ = detected
        table.add_row("Channel", str(channel))
        table.add_row("Feature flaggable", "yes" if channel.supports_features() else "no")

    console = get_console_manager().get(color=state.use_color, emoji=state.use_emoji)
    console.print(table)

    if detected is None:
        warn(
            "Version, channel and commit date could not all be determined.",
            use_emoji=state.use_emoji,
            use_color=state.use_color,
        )
        return ExitCode.UNKNOWN
    return ExitCode.OK


__all__ = ["run_show"]
