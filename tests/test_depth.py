"""Tests for depth input validation (core/depth.py)."""

from __future__ import annotations

import pytest

from itree.core.depth import parse_depth


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("3", 3),
        (" 10 ", 10),
        ("0", 0),
        ("", 6),
        (None, 6),
        ("11", 6),
        ("abc", 6),
        ("-1", 6),
        ("2.5", 6),
        ("٣", 6),
    ],
)
def test_parse_depth(raw: str | None, expected: int) -> None:
    assert parse_depth(raw) == expected


def test_custom_bounds() -> None:
    assert parse_depth("4", default=2, maximum=3) == 2
    assert parse_depth("3", default=2, maximum=3) == 3
