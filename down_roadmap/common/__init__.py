"""공통 유틸리티 모듈.

날짜 계산, 라벨 텍스트, 성능 측정 등 여러 계층에서 쓰는 함수들을 제공합니다.
"""

from .dates import (
    add_days,
    day_difference,
    is_weekend,
    parse_calendar_date,
    to_iso_date,
    truncate_to_day,
    utc_now,
)
from .performance import PerformanceContext, measure_time, measure_time_context
from .text import compact_release_label, format_human_date, format_month, truncate_label

__all__ = [
    "parse_calendar_date",
    "truncate_to_day",
    "add_days",
    "day_difference",
    "to_iso_date",
    "utc_now",
    "is_weekend",
    "truncate_label",
    "compact_release_label",
    "format_month",
    "format_human_date",
    "measure_time",
    "measure_time_context",
    "PerformanceContext",
]
