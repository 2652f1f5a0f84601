# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Answer version, date and channel questions about the installed compiler."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from .channel import Channel
from .compiler import CompilerSource, load_config, read_version_output
from .config import CompilerConfig
from .date import Date
from .features import feature_allowed
from .interfaces import VersionSource
from .parsers import VersionOutput
from .version import Version

LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T", Version, Date)

Triple = tuple[Version, Channel, Date]


def _compare(
    actual: _T | None,
    bound: str,
    parse: Callable[[str], _T | None],
    predicate: Callable[[_T, _T], bool],
) -> bool | None:
    if actual is None:
        return None
    expected = parse(bound)
    if expected is None:
        LOGGER.debug("ignoring malformed bound %r", bound)
        return None
    return predicate(actual, expected)


def build_triple(output: VersionOutput | None) -> Triple | None:
    """Parse ``(version, channel, date)`` out of one parsed invocation.

    A missing commit date fails the whole triple even though the channel only
    needs the version string.
    """

    if output is None or output.version is None or output.date is None:
        return None
    version = Version.parse(output.version)
    channel = Channel.parse(output.version)
    date = Date.parse(output.date)
    if version is None or channel is None or date is None:
        return None
    return version, channel, date


class ToolchainQuery:
    """Query the compiler exposed by a :class:`VersionSource`.

    Every method invokes the source once and never raises for missing
    compilers, unparseable output or malformed bounds; those collapse to
    ``None`` so callers can pick a safe default.
    """

    def __init__(self, source: VersionSource | None = None, *, config: CompilerConfig | None = None) -> None:
        self._config = config
        self.source: VersionSource = source if source is not None else CompilerSource(self.config)

    @property
    def config(self) -> CompilerConfig:
        """Return the configuration, reading the environment on first use.

        An invalid environment value is logged and replaced by defaults.
        """

        if self._config is None:
            self._config = load_config()
        return self._config

    def version(self) -> Version | None:
        return Version.read(self.source)

    def date(self) -> Date | None:
        return Date.read(self.source)

    def channel(self) -> Channel | None:
        return Channel.read(self.source)

    def triple(self) -> Triple | None:
        """Return ``(version, channel, date)`` from a single invocation.

        Returns:
            Triple | None: All three values, or ``None`` if any is missing.
        """

        return build_triple(read_version_output(self.source))

    def is_min_date(self, min_date: str) -> bool | None:
        """Return whether the compiler was committed on or after ``min_date`` (``YYYY-MM-DD``)."""

        return _compare(self.date(), min_date, Date.parse, Date.at_least)

    def is_max_date(self, max_date: str) -> bool | None:
        """Return whether the compiler was committed on or before ``max_date``."""

        return _compare(self.date(), max_date, Date.parse, Date.at_most)

    def is_exact_date(self, date: str) -> bool | None:
        return _compare(self.date(), date, Date.parse, Date.exactly)

    def is_min_version(self, min_version: str) -> bool | None:
        """Return whether the compiler is at least ``min_version``.

        The pre-release tag of ``min_version`` (``1.15.0-beta``) is ignored;
        only the numeric triple is compared.
        """

        return _compare(self.version(), min_version, Version.parse, Version.at_least)

    def is_max_version(self, max_version: str) -> bool | None:
        return _compare(self.version(), max_version, Version.parse, Version.at_most)

    def is_exact_version(self, version: str) -> bool | None:
        return _compare(self.version(), version, Version.parse, Version.exactly)

    def is_feature_flaggable(self) -> bool | None:
        """Return whether the compiler accepts ``#![feature]`` attributes."""

        channel = self.channel()
        return None if channel is None else channel.supports_features()

    def supports_feature(self, feature: str) -> bool | None:
        """Return whether ``#![feature(<feature>)]`` would be accepted.

        Nightly and dev compilers accept every feature unless the configured
        rustflags carry ``-Zallow-features``, which narrows the set.
        """

        return feature_allowed(feature, self.is_feature_flaggable(), self.config)


def _query(source: VersionSource | None) -> ToolchainQuery:
    return ToolchainQuery(source)


def is_min_date(min_date: str, *, source: VersionSource | None = None) -> bool | None:
    return _query(source).is_min_date(min_date)


def is_max_date(max_date: str, *, source: VersionSource | None = None) -> bool | None:
    return _query(source).is_max_date(max_date)


def is_exact_date(date: str, *, source: VersionSource | None = None) -> bool | None:
    return _query(source).is_exact_date(date)


def is_min_version(min_version: str, *, source: VersionSource | None = None) -> bool | None:
    return _query(source).is_min_version(min_version)


def is_max_version(max_version: str, *, source: VersionSource | None = None) -> bool | None:
    return _query(source).is_max_version(max_version)


def is_exact_version(version: str, *, source: VersionSource | None = None) -> bool | None:
    return _query(source).is_exact_version(version)


def is_feature_flaggable(*, source: VersionSource | None = None) -> bool | None:
    return _query(source).is_feature_flaggable()


def supports_feature(feature: str, *, source: VersionSource | None = None) -> bool | None:
    return _query(source).supports_feature(feature)


def triple(*, source: VersionSource | None = None) -> Triple | None:
    return _query(source).triple()


__all__ = [
    "ToolchainQuery",
    "Triple",
    "build_triple",
    "is_exact_date",
    "is_exact_version",
    "is_feature_flaggable",
    "is_max_date",
    "is_max_version",
    "is_min_date",
    "is_min_version",
    "supports_feature",
    "triple",
]
