# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Evaluate version, date and channel predicates against the toolchain."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..channel import Channel
from ..logging import warn
from ..query import ToolchainQuery
from ._shared import CLIContext, ExitCode, combine, report


@dataclass(slots=True)
class CheckRequest:
    """Predicates requested on the command line; ``None`` means not requested."""

    min_version: str | None = None
    max_version: str | None = None
    exact_version: str | None = None
    min_date: str | None = None
    max_date: str | None = None
    exact_date: str | None = None
    channel: Channel | None = None
    feature_flaggable: bool = False

    def predicates(self, query: ToolchainQuery) -> list[tuple[str, Callable[[], bool | None]]]:
        """Return ``(label, evaluate)`` pairs for each requested predicate."""

        checks: list[tuple[str, Callable[[], bool | None]]] = []
        bounds: tuple[tuple[str, str | None, Callable[[str], bool | None]], ...] = (
            ("version >=", self.min_version, query.is_min_version),
            ("version <=", self.max_version, query.is_max_version),
            ("version ==", self.exact_version, query.is_exact_version),
            ("commit date >=", self.min_date, query.is_min_date),
            ("commit date <=", self.max_date, query.is_max_date),
            ("commit date ==", self.exact_date, query.is_exact_date),
        )
        for label, bound, method in bounds:
            if bound is not None:
                checks.append((f"{label} {bound}", _bind(method, bound)))
        if self.channel is not None:
            expected = self.channel
            checks.append((f"channel == {expected}", lambda: _channel_is(query, expected)))
        if self.feature_flaggable:
            checks.append(("feature flaggable", query.is_feature_flaggable))
        return checks


def _bind(method: Callable[[str], bool | None], bound: str) -> Callable[[], bool | None]:
    return lambda: method(bound)


def _channel_is(query: ToolchainQuery, expected: Channel) -> bool | None:
    channel = query.channel()
    return None if channel is None else channel is expected


def run_check(state: CLIContext, request: CheckRequest) -> ExitCode:
    """Report every requested predicate; no predicate at all is ``UNKNOWN``."""

    checks = request.predicates(state.query())
    if not checks:
        warn("No checks requested.", use_emoji=state.use_emoji, use_color=state.use_color)
        return ExitCode.UNKNOWN
    return combine(report(state, label, evaluate()) for label, evaluate in checks)


def run_supports_feature(state: CLIContext, feature: str) -> ExitCode:
    return report(state, f"feature '{feature}' allowed", state.query().supports_feature(feature))


__all__ = ["CheckRequest", "run_check", "run_supports_feature"]
