# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for deciding whether an unstable compiler feature may be enabled."""

from __future__ import annotations

from .config import CompilerConfig
from .constants import ALLOW_FEATURES_FLAG, ENCODED_RUSTFLAGS_SEPARATOR, UNSTABLE_FLAG


def rustflags_tokens(config: CompilerConfig) -> list[str]:
    """Return the compiler flags cargo would pass, preferring the encoded form."""

    if config.encoded_rustflags is not None:
        return [flag for flag in config.encoded_rustflags.split(ENCODED_RUSTFLAGS_SEPARATOR) if flag]
    if config.rustflags is not None:
        return config.rustflags.split()
    return []


def allowed_features(flags: list[str]) -> frozenset[str] | None:
    """Return the last ``-Zallow-features=`` list in ``flags``.

    Both ``-Zallow-features=a,b`` and ``-Z allow-features=a,b`` are accepted.
    ``None`` means no restriction was given.
    """

    allowed: frozenset[str] | None = None
    previous: str | None = None
    for flag in flags:
        if flag.startswith(UNSTABLE_FLAG + ALLOW_FEATURES_FLAG):
            value: str | None = flag[len(UNSTABLE_FLAG + ALLOW_FEATURES_FLAG) :]
        elif previous == UNSTABLE_FLAG and flag.startswith(ALLOW_FEATURES_FLAG):
            value = flag[len(ALLOW_FEATURES_FLAG) :]
        else:
            value = None
        if value is not None:
            allowed = frozenset(name.strip() for name in value.split(",") if name.strip())
        previous = flag
    return allowed


def feature_allowed(feature: str, flaggable: bool | None, config: CompilerConfig) -> bool | None:
    """Combine channel support with any ``-Zallow-features`` restriction.

    Args:
        feature: Unstable feature name, e.g. ``"doc_cfg"``.
        flaggable: Result of the feature-flaggable query; ``None`` when unknown.
        config: Configuration carrying the ``RUSTFLAGS`` values.

    Returns:
        bool | None: ``None`` when the channel is unknown, otherwise whether
        ``#![feature(<feature>)]`` would be accepted.
    """

    if flaggable is None:
        return None
    if not flaggable:
        return False
    allowed = allowed_features(rustflags_tokens(config))
    return True if allowed is None else feature in allowed


__all__ = ["allowed_features", "feature_allowed", "rustflags_tokens"]
