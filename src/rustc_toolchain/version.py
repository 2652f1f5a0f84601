# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Version numbers reported by the compiler."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from .compiler import read_version_output
from .constants import VERSION_COMPONENT_LIMIT

if TYPE_CHECKING:
    from .interfaces import VersionSource

_DECIMAL: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_COMPONENTS: Final[int] = 3
_SHIFT: Final[int] = 16


def decimal_components(parts: list[str], limit: int) -> list[int]:
    """Return the plain decimal entries of ``parts`` that are below ``limit``."""

    values = (int(part) for part in parts if _DECIMAL.fullmatch(part))
    return [value for value in values if value < limit]


@dataclass(frozen=True, order=True, slots=True)
class Version:
    """A ``major.minor.patch`` compiler version.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        tag: Text following the first ``-`` (``nightly``, ``beta``...). Carried
            as metadata only; it takes no part in equality or ordering.
    """

    major: int
    minor: int
    patch: int
    tag: str | None = field(default=None, compare=False)

    @classmethod
    def parse(cls, text: str) -> Version | None:
        """Parse ``MAJOR.MINOR.PATCH[-TAG]``.

        Exactly three decimal components, each fitting in 16 bits, are
        required. ``"1.20"`` is rejected rather than padded with zeroes.

        Args:
            text: Version string such as ``1.50.0`` or ``1.52.0-nightly``.

        Returns:
            Version | None: Parsed version or ``None`` when malformed.
        """

        numeric, sep, tag = text.partition("-")
        components = decimal_components(numeric.split("."), VERSION_COMPONENT_LIMIT)
        if len(components) != _COMPONENTS:
            return None
        major, minor, patch = components
        return cls(major, minor, patch, tag if sep else None)

    @classmethod
    def read(cls, source: VersionSource | None = None) -> Version | None:
        """Return the version of the compiler behind ``source``.

        Args:
            source: Collaborator returning verbose version text. Defaults to
                invoking the compiler selected by the environment.

        Returns:
            Version | None: Installed compiler version, ``None`` when unknown.
        """

        output = read_version_output(source)
        if output is None or output.version is None:
            return None
        return cls.parse(output.version)

    @classmethod
    def from_mmp(cls, packed: int) -> Version:
        """Unpack a value produced by :meth:`to_mmp`."""

        mask = VERSION_COMPONENT_LIMIT - 1
        return cls(packed >> (2 * _SHIFT) & mask, packed >> _SHIFT & mask, packed & mask)

    def to_mmp(self) -> int:
        """Pack the triple into one integer preserving ordering."""

        return self.major << (2 * _SHIFT) | self.minor << _SHIFT | self.patch

    def at_least(self, other: Version) -> bool:
        return self >= other

    def at_most(self, other: Version) -> bool:
        return self <= other

    def exactly(self, other: Version) -> bool:
        return self == other

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


__all__ = ["Version", "decimal_components"]
