# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the rustc-toolchain command-line interface."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

import pytest
from typer.testing import CliRunner

from rustc_toolchain.cli import app

STABLE = "rustc 1.50.0 (cb75ad5db 2021-02-10)\nbinary: rustc\ncommit-date: 2021-02-10\nrelease: 1.50.0\n"
NIGHTLY = "rustc 1.52.0-nightly (234781afe 2021-03-07)\ncommit-date: 2021-03-07\nrelease: 1.52.0-nightly\n"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _fake_compiler(monkeypatch: pytest.MonkeyPatch, output: str | None) -> list[list[str]]:
    calls: list[list[str]] = []

    def fake_run(args: Sequence[str], *, env=None, timeout=None):  # noqa: ANN001
        calls.append(list(args))
        if output is None:
            raise FileNotFoundError(f"Executable '{args[0]}' was not found on PATH")
        return subprocess.CompletedProcess(args=list(args), returncode=0, stdout=output, stderr="")

    monkeypatch.setattr("rustc_toolchain.compiler.run_command", fake_run)
    return calls


def test_show_prints_triple(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    _fake_compiler(monkeypatch, NIGHTLY)

    result = runner.invoke(app, ["--no-emoji", "show"])

    assert result.exit_code == 0
    assert "1.52.0-nightly" in result.stdout
    assert "2021-03-07" in result.stdout
    assert "nightly" in result.stdout


def test_show_without_compiler(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    _fake_compiler(monkeypatch, None)

    result = runner.invoke(app, ["--no-emoji", "show"])

    assert result.exit_code == 2
    assert "Failed to invoke 'rustc'" in result.stdout


def test_show_without_commit_date(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    _fake_compiler(monkeypatch, "rustc 1.50.0\ncommit-date: unknown\n")

    result = runner.invoke(app, ["--no-emoji", "show"])

    assert result.exit_code == 2
    assert "could not all be determined" in result.stdout


def test_compiler_option_overrides_environment(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RUSTC", "/from/env/rustc")
    calls = _fake_compiler(monkeypatch, STABLE)

    result = runner.invoke(app, ["--compiler", "/custom/rustc", "check", "--min-version", "1.0.0"])

    assert result.exit_code == 0
    assert calls[0][0] == "/custom/rustc"


def test_check_all_predicates_hold(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    _fake_compiler(monkeypatch, STABLE)

    result = runner.invoke(
        app,
        ["--no-emoji", "check", "--min-version", "1.49.0", "--max-date", "2021-12-31", "--channel", "stable"],
    )

    assert result.exit_code == 0
    assert "version >= 1.49.0: yes" in result.stdout
    assert "commit date <= 2021-12-31: yes" in result.stdout
    assert "channel == stable: yes" in result.stdout


def test_check_reports_false_predicate(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    _fake_compiler(monkeypatch, STABLE)

    result = runner.invoke(app, ["--no-emoji", "check", "--min-version", "1.49.0", "--feature-flaggable"])

    assert result.exit_code == 1
    assert "feature flaggable: no" in result.stdout


def test_check_unknown_outranks_false(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    _fake_compiler(monkeypatch, STABLE)

    result = runner.invoke(app, ["--no-emoji", "check", "--max-date", "2020-01-01", "--min-version", "1.20"])

    assert result.exit_code == 2
    assert "version >= 1.20: unknown" in result.stdout
    assert "commit date <= 2020-01-01: no" in result.stdout


def test_check_without_predicates(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _fake_compiler(monkeypatch, STABLE)

    result = runner.invoke(app, ["--no-emoji", "check"])

    assert result.exit_code == 2
    assert "No checks requested." in result.stdout
    assert calls == []


def test_supports_feature(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    _fake_compiler(monkeypatch, NIGHTLY)
    monkeypatch.setenv("RUSTFLAGS", "-Zallow-features=doc_cfg")

    allowed = runner.invoke(app, ["--no-emoji", "supports-feature", "doc_cfg"])
    denied = runner.invoke(app, ["--no-emoji", "supports-feature", "specialization"])

    assert allowed.exit_code == 0
    assert denied.exit_code == 1


def test_invalid_environment_is_reported(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RUSTC_TOOLCHAIN_TIMEOUT", "soon")

    result = runner.invoke(app, ["--no-emoji", "show"])

    assert result.exit_code == 2
    assert "Invalid compiler configuration" in result.stdout
