# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""rustc_toolchain - query the version, commit date and channel of ``rustc``.

Every query returns ``None`` when the compiler cannot be found, its output
cannot be parsed, or the requested bound is malformed.
"""

from __future__ import annotations

from .channel import Channel
from .compiler import CompilerSource
from .config import CompilerConfig
from .date import Date
from .interfaces import VersionSource
from .parsers import VersionOutput, parse_simple, parse_verbose, parse_version_output
from .query import (
    ToolchainQuery,
    Triple,
    is_exact_date,
    is_exact_version,
    is_feature_flaggable,
    is_max_date,
    is_max_version,
    is_min_date,
    is_min_version,
    supports_feature,
    triple,
)
from .version import Version

__version__ = "0.1.0"

__all__ = [
    "Channel",
    "CompilerSource",
    "Date",
    "CompilerConfig",
    "ToolchainQuery",
    "Triple",
    "Version",
    "VersionOutput",
    "VersionSource",
    "__version__",
    "is_exact_date",
    "is_exact_version",
    "is_feature_flaggable",
    "is_max_date",
    "is_max_version",
    "is_min_date",
    "is_min_version",
    "parse_simple",
    "parse_verbose",
    "parse_version_output",
    "supports_feature",
    "triple",
]
