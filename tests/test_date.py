# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for :class:`rustc_toolchain.date.Date`."""

from __future__ import annotations

import pytest

from rustc_toolchain.date import Date


def test_parse_date() -> None:
    assert Date.parse("2021-02-10") == Date(2021, 2, 10)


@pytest.mark.parametrize(
    "text",
    ["not-a-date", "2021-02", "2021-02-10-01", "2021/02/10", "", "65536-01-01", "2021-16-01", "2021-01-32"],
)
def test_parse_rejects_malformed(text: str) -> None:
    assert Date.parse(text) is None


def test_parse_does_not_check_calendar() -> None:
    assert Date.parse("2021-02-31") == Date(2021, 2, 31)
    assert Date.parse("2021-00-00") == Date(2021, 0, 0)


def test_chronological_ordering() -> None:
    assert Date.parse("2016-12-18") < Date.parse("2017-01-09")  # type: ignore[operator]
    assert Date(2021, 2, 10) > Date(2021, 1, 31)
    assert Date(2021, 2, 10).at_least(Date(2021, 2, 10))
    assert Date(2021, 2, 10).at_most(Date(2021, 2, 11))
    assert not Date(2021, 2, 10).exactly(Date(2021, 2, 11))


def test_ymd_packing_preserves_order() -> None:
    earlier, later = Date(2016, 12, 18), Date(2017, 1, 9)
    assert earlier.to_ymd() < later.to_ymd()
    assert Date.from_ymd(later.to_ymd()) == later


def test_str_zero_pads() -> None:
    assert str(Date(2021, 2, 1)) == "2021-02-01"


def test_read(stable_source, make_source) -> None:
    assert Date.read(stable_source) == Date(2021, 2, 10)
    assert Date.read(make_source("rustc 1.50.0\ncommit-date: unknown\n")) is None
    assert Date.read(make_source(None)) is None
