# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

STABLE_VERBOSE = (
    "rustc 1.50.0 (cb75ad5db 2021-02-10)\n"
    "binary: rustc\n"
    "commit-hash: cb75ad5db02783e8b0222fee363c5f63f7e2cf5b\n"
    "commit-date: 2021-02-10\n"
    "host: x86_64-unknown-linux-gnu\n"
    "release: 1.50.0\n"
)

NIGHTLY_VERBOSE = (
    "rustc 1.52.0-nightly (234781afe 2021-03-07)\n"
    "binary: rustc\n"
    "commit-hash: 234781afe33d3f339b002f85f948046d8476cfc9\n"
    "commit-date: 2021-03-07\n"
    "host: x86_64-unknown-linux-gnu\n"
    "release: 1.52.0-nightly\n"
    "LLVM version: 12.0.0\n"
)


class FakeSource:
    """Collaborator returning canned text and counting invocations."""

    def __init__(self, text: str | None) -> None:
        self.text = text
        self.calls = 0

    def __call__(self) -> str | None:
        self.calls += 1
        return self.text


@pytest.fixture
def make_source() -> Callable[[str | None], FakeSource]:
    """Return a factory producing :class:`FakeSource` instances."""
    return FakeSource


@pytest.fixture
def stable_text() -> str:
    return STABLE_VERBOSE


@pytest.fixture
def nightly_text() -> str:
    return NIGHTLY_VERBOSE


@pytest.fixture
def stable_source() -> FakeSource:
    return FakeSource(STABLE_VERBOSE)


@pytest.fixture
def nightly_source() -> FakeSource:
    return FakeSource(NIGHTLY_VERBOSE)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host toolchain variables from leaking into configuration."""
    for name in ("RUSTC", "RUSTFLAGS", "CARGO_ENCODED_RUSTFLAGS", "RUSTC_TOOLCHAIN_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
