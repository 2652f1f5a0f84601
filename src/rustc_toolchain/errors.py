# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Internal error taxonomy.

Public queries never raise these; they are caught where the compiler is
invoked and logged before the result collapses to ``None``.
"""

from __future__ import annotations


class ToolchainError(Exception):
    """Base class for failures while querying a toolchain."""


class CompilerInvocationError(ToolchainError):
    """Raised when the compiler binary cannot be executed successfully."""

    def __init__(self, compiler: str, reason: str) -> None:
        super().__init__(f"Failed to invoke '{compiler}': {reason}")
        self.compiler = compiler
        self.reason = reason


class OutputParseError(ToolchainError):
    """Raised when compiler output does not contain a usable version banner."""


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


__all__ = [
    "CompilerInvocationError",
    "ConfigError",
    "OutputParseError",
    "ToolchainError",
]
