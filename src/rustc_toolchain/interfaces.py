# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Interfaces consumed by the parsing and comparison core."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class VersionSource(Protocol):
    """Produce the raw verbose version text of a compiler."""

    @abstractmethod
    def __call__(self) -> str | None:
        """Return the verbose version output, or ``None`` when unavailable.

        Returns:
            str | None: Text emitted by ``rustc --verbose --version``; ``None``
            when the compiler could not be located or invoked.
        """
        raise NotImplementedError


__all__ = ["VersionSource"]
