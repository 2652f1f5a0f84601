# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared options."""

from __future__ import annotations

from typing import Annotated

import typer

from ..channel import Channel
from ..config import CompilerConfig
from ..errors import ConfigError
from ..logging import configure_logging, fail
from ._shared import CLIContext, ExitCode, get_context
from .check import CheckRequest, run_check, run_supports_feature
from .show import run_show

app = typer.Typer(
    help="Inspect the version, commit date and release channel of rustc.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    compiler: Annotated[
        str | None,
        typer.Option("--compiler", help="Compiler executable to query (defaults to $RUSTC, then rustc)."),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="Seconds to wait for the compiler before giving up."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug details to stderr.")] = False,
    color: Annotated[bool, typer.Option("--color/--no-color", help="Colourise output.")] = True,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Prefix messages with emoji.")] = True,
) -> None:
    """Resolve configuration shared by every command."""

    configure_logging(verbose=verbose)
    try:
        config = CompilerConfig.from_env(compiler=compiler, timeout=timeout)
    except ConfigError as exc:
        fail(str(exc), use_emoji=emoji, use_color=color)
        raise typer.Exit(code=ExitCode.UNKNOWN) from exc
    ctx.obj = CLIContext(config=config, use_color=color, use_emoji=emoji)


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Print version, channel and commit date of the compiler."""

    raise typer.Exit(code=run_show(get_context(ctx)))


@app.command("check")
def check_command(
    ctx: typer.Context,
    min_version: Annotated[str | None, typer.Option("--min-version", help="MAJOR.MINOR.PATCH lower bound.")] = None,
    max_version: Annotated[str | None, typer.Option("--max-version", help="MAJOR.MINOR.PATCH upper bound.")] = None,
    exact_version: Annotated[str | None, typer.Option("--exact-version", help="Exact MAJOR.MINOR.PATCH.")] = None,
    min_date: Annotated[str | None, typer.Option("--min-date", help="YYYY-MM-DD lower bound.")] = None,
    max_date: Annotated[str | None, typer.Option("--max-date", help="YYYY-MM-DD upper bound.")] = None,
    exact_date: Annotated[str | None, typer.Option("--exact-date", help="Exact YYYY-MM-DD commit date.")] = None,
    channel: Annotated[
        Channel | None,
        typer.Option("--channel", case_sensitive=False, help="Required release channel."),
    ] = None,
    feature_flaggable: Annotated[
        bool,
        typer.Option("--feature-flaggable", help="Require a nightly or dev compiler."),
    ] = False,
) -> None:
    """Exit 0 when every predicate holds, 1 when one fails, 2 when one is unknown."""

    request = CheckRequest(
        min_version=min_version,
        max_version=max_version,
        exact_version=exact_version,
        min_date=min_date,
        max_date=max_date,
        exact_date=exact_date,
        channel=channel,
        feature_flaggable=feature_flaggable,
    )
    raise typer.Exit(code=run_check(get_context(ctx), request))


@app.command("supports-feature")
def supports_feature_command(
    ctx: typer.Context,
    feature: Annotated[str, typer.Argument(help="Unstable feature name, e.g. doc_cfg.")],
) -> None:
    """Check whether ``#![feature(NAME)]`` would be accepted."""

    raise typer.Exit(code=run_supports_feature(get_context(ctx), feature))


def main() -> None:
    app()


__all__ = ["app", "main"]
