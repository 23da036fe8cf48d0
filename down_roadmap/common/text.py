"""
라벨 텍스트 유틸리티

실험 막대와 릴리스 라벨에 들어가는 문자열을 줄이거나 정리합니다.
두 렌더러가 같은 입력에 대해 같은 문자열을 얻도록 결정적으로 동작해야 합니다.
"""

from __future__ import annotations

import re

import pandas as pd

ELLIPSIS = "…"

# "<이름> <버전>[<접미사>]" 형태에서 접미사를 떼어내기 위한 패턴
_RELEASE_VERSION_PATTERN = re.compile(r"^(.+?)(\s+)([0-9.]+)([^0-9.].*)?$")

_LABEL_ABBREVIATIONS = (("Backend", "BE"),)


def truncate_label(text: str, max_chars: int) -> str:
    """
    최대 글자 수를 넘는 문자열을 말줄임표로 자릅니다.

    Args:
        text: 원본 문자열
        max_chars: 최대 글자 수 (1 미만이면 1로 취급)

    Returns:
        길이가 max_chars 이하인 문자열. 잘린 경우 마지막 글자는 "…"

    Examples:
        >>> truncate_label("Checkout redesign", 9)
        'Checkout…'
    """
    limit = max(1, int(max_chars))
    if len(text) <= limit:
        return text
    return text[: limit - 1] + ELLIPSIS


def compact_release_label(label: str) -> str:
    """
    릴리스 이름에서 버전 뒤의 설명을 떼어내고 약어를 적용합니다.

    Examples:
        >>> compact_release_label("Growth Backend 2.3.1 rollout")
        'Growth BE 2.3.1'
        >>> compact_release_label("Backend hotfix")
        'BE hotfix'
    """
    match = _RELEASE_VERSION_PATTERN.match(label)
    short = "".join(match.group(1, 2, 3)) if match else label
    for word, abbreviation in _LABEL_ABBREVIATIONS:
        short = short.replace(word, abbreviation)
    return short


def format_month(date: pd.Timestamp) -> str:
    """'January' 형식의 월 이름."""
    return pd.Timestamp(date).month_name()


def format_human_date(date: pd.Timestamp) -> str:
    """'Jan 3, 2024' 형식의 날짜."""
    ts = pd.Timestamp(date)
    return f"{ts.month_name()[:3]} {ts.day}, {ts.year}"
