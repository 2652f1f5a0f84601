# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Release channel classification."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .compiler import read_version_output

if TYPE_CHECKING:
    from .interfaces import VersionSource


class Channel(str, Enum):
    """Enumerate the release channels a compiler build can belong to."""

    STABLE = "stable"
    BETA = "beta"
    NIGHTLY = "nightly"
    DEV = "dev"

    @classmethod
    def parse(cls, text: str) -> Channel | None:
        """Classify a raw version string such as ``1.52.0-nightly``.

        Substrings are checked in the order nightly, beta, dev; anything else
        is stable.

        Args:
            text: Version string as printed by the compiler.

        Returns:
            Channel | None: Detected channel, ``None`` only for empty text.
        """

        if not text:
            return None
        for channel in (cls.NIGHTLY, cls.BETA, cls.DEV):
            if channel.value in text:
                return channel
        return cls.STABLE

    @classmethod
    def read(cls, source: VersionSource | None = None) -> Channel | None:
        """Return the release channel of the compiler behind ``source``."""

        output = read_version_output(source)
        if output is None or output.version is None:
            return None
        return cls.parse(output.version)

    def is_stable(self) -> bool:
        return self is Channel.STABLE

    def is_beta(self) -> bool:
        return self is Channel.BETA

    def is_nightly(self) -> bool:
        return self is Channel.NIGHTLY

    def is_dev(self) -> bool:
        return self is Channel.DEV

    def supports_features(self) -> bool:
        """Return ``True`` when the channel accepts unstable feature flags."""

        return self in {Channel.NIGHTLY, Channel.DEV}

    def __str__(self) -> str:
        return self.value


__all__ = ["Channel"]
