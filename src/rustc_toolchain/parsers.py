# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers extracting version and date strings from compiler output."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .constants import COMMIT_DATE_LABEL, DEFAULT_PRODUCT, RELEASE_LABEL, UNKNOWN_COMMIT_DATE


@dataclass(frozen=True, slots=True)
class VersionOutput:
    """Raw version and commit date strings read from one compiler invocation."""

    version: str | None = None
    date: str | None = None

    @property
    def complete(self) -> bool:
        """Return ``True`` when both the version and the date were found."""

        return self.version is not None and self.date is not None


class LineShape(str, Enum):
    """Enumerate the mutually exclusive shapes of a verbose output line."""

    HEADER = "header"
    RELEASE = "release"
    COMMIT_DATE = "commit-date"
    OTHER = "other"


def classify_line(line: str, *, product: str = DEFAULT_PRODUCT) -> LineShape:
    """Return the :class:`LineShape` describing ``line``.

    Args:
        line: Single line of ``--verbose --version`` output.
        product: Product name token that starts the version banner.

    Returns:
        LineShape: Shape used to decide how the line updates parser state.
    """

    if line.startswith(f"{product} "):
        return LineShape.HEADER
    if line.startswith(RELEASE_LABEL):
        return LineShape.RELEASE
    if line.startswith(COMMIT_DATE_LABEL):
        return LineShape.COMMIT_DATE
    return LineShape.OTHER


def parse_simple(text: str) -> VersionOutput | None:
    """Parse a single-line ``rustc 1.50.0 (cb75ad5db 2021-02-10)`` banner.

    Only the first line of ``text`` is considered. The token following the
    product name is the version; the first later token ending in ``)`` holds
    the commit date. A missing date is not an error, a missing version is.

    Args:
        text: Banner text, typically the output of ``rustc --version``.

    Returns:
        VersionOutput | None: Parsed strings, or ``None`` without a version token.
    """

    lines = text.splitlines()
    if not lines:
        return None
    tokens = lines[0].split()
    if len(tokens) < 2:
        return None
    version = tokens[1]
    date = next((_strip_date(token) for token in tokens[2:] if token.endswith(")")), None)
    return VersionOutput(version=version, date=date or None)


def _strip_date(token: str) -> str:
    return token.rstrip(")").strip().removeprefix("(")


@dataclass(frozen=True, slots=True)
class _VerboseState:
    """Accumulator threaded through :func:`parse_verbose`."""

    version: str | None = None
    date: str | None = None

    def feed(self, line: str, *, product: str) -> _VerboseState:
        shape = classify_line(line, product=product)
        if shape is LineShape.HEADER:
            header = parse_simple(line)
            if header is None:
                return self
            return replace(
                self,
                version=self.version if self.version is not None else header.version,
                date=self.date if self.date is not None else header.date,
            )
        if shape is LineShape.RELEASE:
            return replace(self, version=_label_value(line, RELEASE_LABEL))
        if shape is LineShape.COMMIT_DATE:
            value = _label_value(line, COMMIT_DATE_LABEL)
            # Out-of-tree builds report no commit metadata.
            if value == UNKNOWN_COMMIT_DATE:
                value = None
            return replace(self, date=value)
        return self


def _label_value(line: str, label: str) -> str | None:
    return line[len(label) :].strip() or None


def parse_verbose(text: str, *, product: str = DEFAULT_PRODUCT) -> VersionOutput:
    """Parse ``rustc --verbose --version`` output.

    Lines that do not look like a version banner or a recognised label are
    skipped, so diagnostic noise printed before the banner is tolerated. The
    first banner line seeds the version and date; ``release:`` and
    ``commit-date:`` lines override them.

    Args:
        text: Full verbose version output.
        product: Product name token that starts the version banner.

    Returns:
        VersionOutput: Parsed strings; either field may be ``None``.
    """

    state = _VerboseState()
    for line in text.splitlines():
        state = state.feed(line, product=product)
    return VersionOutput(version=state.version, date=state.date)


def parse_version_output(text: str | None, *, product: str = DEFAULT_PRODUCT) -> VersionOutput | None:
    """Parse collaborator output using the verbose strategy.

    Args:
        text: Raw compiler output or ``None`` when the invocation failed.
        product: Product name token that starts the version banner.

    Returns:
        VersionOutput | None: Parsed strings, or ``None`` when ``text`` is ``None``.
    """

    if text is None:
        return None
    return parse_verbose(text, product=product)


__all__ = [
    "LineShape",
    "VersionOutput",
    "classify_line",
    "parse_simple",
    "parse_verbose",
    "parse_version_output",
]
