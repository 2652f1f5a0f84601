# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Commit dates reported by the compiler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from .compiler import read_version_output
from .constants import DAY_LIMIT, MONTH_LIMIT, YEAR_LIMIT
from .version import decimal_components

if TYPE_CHECKING:
    from .interfaces import VersionSource

_COMPONENTS: Final[int] = 3


@dataclass(frozen=True, order=True, slots=True)
class Date:
    """A ``YYYY-MM-DD`` commit date compared chronologically.

    Components are only checked against their packed bit widths; ``2021-02-31``
    is accepted.
    """

    year: int
    month: int
    day: int

    @classmethod
    def parse(cls, text: str) -> Date | None:
        """Parse ``YYYY-MM-DD`` into a :class:`Date`, or ``None`` when malformed."""

        components = decimal_components(text.split("-"), YEAR_LIMIT)
        if len(components) != _COMPONENTS:
            return None
        year, month, day = components
        if month >= MONTH_LIMIT or day >= DAY_LIMIT:
            return None
        return cls(year, month, day)

    @classmethod
    def read(cls, source: VersionSource | None = None) -> Date | None:
        """Return the commit date of the compiler behind ``source``."""

        output = read_version_output(source)
        if output is None or output.date is None:
            return None
        return cls.parse(output.date)

    @classmethod
    def from_ymd(cls, packed: int) -> Date:
        return cls(packed >> 9, packed >> 5 & (MONTH_LIMIT - 1), packed & (DAY_LIMIT - 1))

    def to_ymd(self) -> int:
        return self.year << 9 | self.month << 5 | self.day

    def at_least(self, other: Date) -> bool:
        return self >= other

    def at_most(self, other: Date) -> bool:
        return self <= other

    def exactly(self, other: Date) -> bool:
        return self == other

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02}-{self.day:02}"


__all__ = ["Date"]
