# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering the simple and verbose version output parsers."""

from __future__ import annotations

import pytest

from rustc_toolchain.parsers import (
    LineShape,
    VersionOutput,
    classify_line,
    parse_simple,
    parse_verbose,
    parse_version_output,
)


@pytest.mark.parametrize("version", ["1.0.0", "1.50.0", "1.52.0-nightly", "1.20.0-beta.2"])
def test_parse_simple_version_without_date(version: str) -> None:
    assert parse_simple(f"rustc {version}") == VersionOutput(version=version, date=None)


@pytest.mark.parametrize(
    ("banner", "version", "date"),
    [
        ("rustc 1.50.0 (cb75ad5db 2021-02-10)", "1.50.0", "2021-02-10"),
        ("rustc 1.52.0-nightly (234781afe 2021-03-07)", "1.52.0-nightly", "2021-03-07"),
        ("rustc 1.3.0 (9a92aaf19 2015-09-15)\n", "1.3.0", "2015-09-15"),
        ("rustc 1.47.0 (18bf6b4f0 2020-10-07) (Arch Linux rust 1:1.47.0-1)", "1.47.0", "2020-10-07"),
    ],
)
def test_parse_simple_extracts_date(banner: str, version: str, date: str) -> None:
    assert parse_simple(banner) == VersionOutput(version=version, date=date)


def test_parse_simple_only_reads_first_line() -> None:
    result = parse_simple("rustc 1.50.0\nrustc 1.51.0 (abc 2021-03-01)")
    assert result == VersionOutput(version="1.50.0", date=None)


@pytest.mark.parametrize("text", ["", "rustc", "   ", "\nrustc 1.50.0"])
def test_parse_simple_requires_version_token(text: str) -> None:
    assert parse_simple(text) is None


def test_parse_verbose_reads_labels(stable_text: str) -> None:
    result = parse_verbose(stable_text)
    assert result == VersionOutput(version="1.50.0", date="2021-02-10")
    assert result.complete


@pytest.mark.parametrize("noise_lines", [0, 1, 5])
def test_parse_verbose_ignores_leading_noise(noise_lines: int, nightly_text: str) -> None:
    noise = "".join(f"warning: unused config key {index}\n" for index in range(noise_lines))
    assert parse_verbose(noise + nightly_text) == parse_verbose(nightly_text)


def test_parse_verbose_release_overrides_header() -> None:
    text = "rustc 1.50.0 (cb75ad5db 2021-02-10)\nrelease: 1.51.0-beta.3\n"
    assert parse_verbose(text).version == "1.51.0-beta.3"


def test_parse_verbose_unknown_commit_date_clears_date() -> None:
    text = "rustc 1.50.0 (cb75ad5db 2021-02-10)\ncommit-date: unknown\nrelease: 1.50.0\n"
    result = parse_verbose(text)
    assert result.version == "1.50.0"
    assert result.date is None
    assert not result.complete


def test_parse_verbose_first_header_wins() -> None:
    text = "rustc 1.50.0 (aaa 2021-02-10)\nrustc 1.60.0 (bbb 2022-04-04)\n"
    assert parse_verbose(text) == VersionOutput(version="1.50.0", date="2021-02-10")


def test_parse_verbose_labels_without_header() -> None:
    text = "binary: rustc\ncommit-date: 2020-01-01\nrelease: 1.41.0\n"
    assert parse_verbose(text) == VersionOutput(version="1.41.0", date="2020-01-01")


def test_parse_verbose_uses_product_name() -> None:
    text = "mrustc 0.10.0 (abc 2021-01-01)\n"
    assert parse_verbose(text) == VersionOutput()
    assert parse_verbose(text, product="mrustc") == VersionOutput(version="0.10.0", date="2021-01-01")


def test_parse_verbose_without_banner() -> None:
    assert parse_verbose("error: no such command\n") == VersionOutput()


def test_parse_version_output_passes_through_missing_text(stable_text: str) -> None:
    assert parse_version_output(None) is None
    assert parse_version_output(stable_text) == parse_verbose(stable_text)


@pytest.mark.parametrize(
    ("line", "shape"),
    [
        ("rustc 1.50.0", LineShape.HEADER),
        ("release: 1.50.0", LineShape.RELEASE),
        ("commit-date: 2021-02-10", LineShape.COMMIT_DATE),
        ("rustc-1.50.0", LineShape.OTHER),
        ("  release: 1.50.0", LineShape.OTHER),
        ("binary: rustc", LineShape.OTHER),
    ],
)
def test_classify_line(line: str, shape: LineShape) -> None:
    assert classify_line(line) is shape
