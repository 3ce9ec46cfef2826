"""Unit tests for formatting helpers."""

import datetime

from cherry_quick.pretty import format_date, local_date, truncate


def test_truncate_over_limit() -> None:
    text = "x" * 81
    result = truncate(text, 80)
    assert result == "x" * 79 + "…"
    assert len(result) == 80


def test_truncate_at_limit_unchanged() -> None:
    text = "x" * 80
    assert truncate(text, 80) == text


def test_truncate_strips_trailing_space_before_ellipsis() -> None:
    assert truncate("abc def", 5) == "abc…"


def test_local_date(local_ms) -> None:
    assert local_date(local_ms(2024, 3, 9, 23, 59)) == datetime.date(2024, 3, 9)


def test_format_date() -> None:
    assert format_date(datetime.date(2024, 1, 1)) == "Mon Jan 01 2024"
