# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across rustc_toolchain modules."""

from __future__ import annotations

from typing import Final

DEFAULT_COMPILER: Final[str] = "rustc"
DEFAULT_PRODUCT: Final[str] = "rustc"
VERBOSE_VERSION_ARGS: Final[tuple[str, ...]] = ("--verbose", "--version")

RELEASE_LABEL: Final[str] = "release:"
COMMIT_DATE_LABEL: Final[str] = "commit-date:"
UNKNOWN_COMMIT_DATE: Final[str] = "unknown"

COMPILER_ENV: Final[str] = "RUSTC"
TIMEOUT_ENV: Final[str] = "RUSTC_TOOLCHAIN_TIMEOUT"
RUSTFLAGS_ENV: Final[str] = "RUSTFLAGS"
ENCODED_RUSTFLAGS_ENV: Final[str] = "CARGO_ENCODED_RUSTFLAGS"
ENCODED_RUSTFLAGS_SEPARATOR: Final[str] = "\x1f"
UNSTABLE_FLAG: Final[str] = "-Z"
ALLOW_FEATURES_FLAG: Final[str] = "allow-features="

# Upper bounds (exclusive) for the packed component bit widths.
VERSION_COMPONENT_LIMIT: Final[int] = 1 << 16
YEAR_LIMIT: Final[int] = 1 << 16
MONTH_LIMIT: Final[int] = 1 << 4
DAY_LIMIT: Final[int] = 1 << 5
