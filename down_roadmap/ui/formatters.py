"""마크업 포맷팅 유틸리티 모듈.

HTML/SVG 문자열을 만들 때 쓰는 이스케이프와 숫자 포맷 함수를 제공합니다.
"""

from __future__ import annotations

import math


def escape(value: object) -> str:
    """HTML/XML 이스케이프 처리를 수행합니다 (속성값에도 안전).

    Args:
        value: 이스케이프할 값

    Returns:
        이스케이프된 문자열
    """
    return (
        ("" if value is None else str(value))
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def round_half_up(value: float, digits: int = 0) -> float:
    """0.5를 항상 올림하는 반올림 (파이썬 기본 round는 짝수 쪽으로 반올림)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def format_number(value: float) -> str:
    """좌표/크기 값을 마크업용 문자열로 변환합니다.

    정수 값은 소수점 없이, 그 외에는 불필요한 0을 뺀 소수로 표시합니다.

    Examples:
        >>> format_number(58.0)
        '58'
        >>> format_number(13.32)
        '13.32'
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return f"{number:.4f}".rstrip("0").rstrip(".")
