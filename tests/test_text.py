"""
라벨 텍스트 유틸리티 테스트
"""
from __future__ import annotations

import pandas as pd
import pytest

from down_roadmap.common.text import (
    compact_release_label,
    format_human_date,
    format_month,
    truncate_label,
)


# ============================================================
# truncate_label
# ============================================================

def test_truncate_label_short_text_unchanged():
    """최대 길이 이하면 그대로"""
    assert truncate_label("Checkout", 8) == "Checkout"
    assert truncate_label("", 5) == ""


def test_truncate_label_adds_single_ellipsis():
    """초과 시 max_chars - 1 글자 + 말줄임표"""
    result = truncate_label("Checkout redesign", 9)

    assert result == "Checkout…"
    assert len(result) == 9


@pytest.mark.parametrize("max_chars", [0, -3])
def test_truncate_label_non_positive_limit(max_chars):
    """1 미만의 최대 길이는 1로 취급"""
    assert truncate_label("abc", max_chars) == "…"
    assert truncate_label("a", max_chars) == "a"


@pytest.mark.parametrize(
    "text,max_chars",
    [("Checkout redesign", 9), ("short", 20), ("abcdef", 1), ("abcdef", 6), ("abcdefg", 6)],
)
def test_truncate_label_idempotent(text, max_chars):
    """두 번 적용해도 결과가 같음"""
    once = truncate_label(text, max_chars)

    assert truncate_label(once, max_chars) == once


# ============================================================
# compact_release_label
# ============================================================

@pytest.mark.parametrize(
    "label,expected",
    [
        ("Growth Backend 2.3.1 rollout", "Growth BE 2.3.1"),
        ("iOS 4.12.0", "iOS 4.12.0"),
        ("Android 4.12.0 (hotfix)", "Android 4.12.0"),
        ("Backend hotfix", "BE hotfix"),
        ("Launch party", "Launch party"),
        ("Backend and Backend 1.2 beta", "BE and BE 1.2"),
    ],
)
def test_compact_release_label(label, expected):
    """버전 뒤 접미사 제거 + Backend 약어"""
    assert compact_release_label(label) == expected


def test_compact_release_label_needs_whitespace_before_version():
    """공백 없이 붙은 버전은 접미사를 자르지 않음"""
    assert compact_release_label("v2.0-final") == "v2.0-final"


# ============================================================
# 날짜 포맷
# ============================================================

def test_format_month_and_human_date():
    """영문 월 이름 / 'Jan 3, 2024' 형식"""
    ts = pd.Timestamp("2024-01-03")

    assert format_month(ts) == "January"
    assert format_human_date(ts) == "Jan 3, 2024"
    assert format_human_date(pd.Timestamp("2023-12-25")) == "Dec 25, 2023"
