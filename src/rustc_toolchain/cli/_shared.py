# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared state and helpers for CLI commands."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

import typer

from ..compiler import CompilerSource
from ..config import CompilerConfig
from ..logging import fail, ok, warn
from ..query import ToolchainQuery


class ExitCode(IntEnum):
    """Process exit statuses shared by every command."""

    OK = 0
    FALSE = 1
    UNKNOWN = 2


@dataclass(slots=True)
class CLIContext:
    """Options collected by the root callback."""

    config: CompilerConfig
    use_color: bool
    use_emoji: bool

    def source(self) -> CompilerSource:
        return CompilerSource(self.config)

    def query(self) -> ToolchainQuery:
        return ToolchainQuery(self.source(), config=self.config)


def get_context(ctx: typer.Context) -> CLIContext:
    state = ctx.obj
    if not isinstance(state, CLIContext):
        raise typer.BadParameter("CLI context was not initialised")
    return state


def report(state: CLIContext, label: str, result: bool | None) -> ExitCode:
    """Print one predicate outcome and return the matching exit code."""

    if result is None:
        warn(f"{label}: unknown", use_emoji=state.use_emoji, use_color=state.use_color)
        return ExitCode.UNKNOWN
    if result:
        ok(f"{label}: yes", use_emoji=state.use_emoji, use_color=state.use_color)
        return ExitCode.OK
    fail(f"{label}: no", use_emoji=state.use_emoji, use_color=state.use_color)
    return ExitCode.FALSE


def combine(codes: Iterable[ExitCode]) -> ExitCode:
    """Return the most severe exit code; an unknown outcome outranks a false one."""

    return max(codes, default=ExitCode.UNKNOWN)


__all__ = ["CLIContext", "ExitCode", "combine", "get_context", "report"]
