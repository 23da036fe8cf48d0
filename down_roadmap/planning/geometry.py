"""
렌더러 공용 좌표 계산

HTML 뷰와 SVG 내보내기가 같은 픽셀 위치를 쓰도록 좌표 공식을 한 곳에 모아둡니다.
렌더러는 이 함수들만 사용하고 좌표를 따로 계산하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import pandas as pd

from ..common.dates import add_days, day_difference, truncate_to_day
from ..core.config import (
    DAY_WIDTH,
    EXPERIMENT_BAR_HEIGHT,
    EXPERIMENT_ROW_HEIGHT,
    RELEASE_LANE_HEIGHT,
)
from ..domain.models import BandLayout, PositionedExperiment, PositionedRelease, TimelineLayout


@dataclass(frozen=True)
class BarGeometry:
    """실험 막대의 위치와 크기 (본문 기준 픽셀)."""

    x: int
    top: int
    width: int
    height: int


def day_center_x(day_index: int) -> int:
    return day_index * DAY_WIDTH + DAY_WIDTH // 2


def release_anchor_x(day_index: int) -> int:
    """릴리스 점의 x 좌표 (해당 일자 칸의 가운데)."""
    return day_center_x(day_index)


def experiment_bar(experiment: PositionedExperiment, bands: BandLayout) -> BarGeometry:
    """
    실험 막대의 좌표를 계산합니다.

    - x: 시작 칸 왼쪽 + 2px
    - width: 일수 * DAY_WIDTH - 4px (최소 DAY_WIDTH)
    - top: 실험 밴드 상단 + row * EXPERIMENT_ROW_HEIGHT
    """
    span_days = experiment.end_index - experiment.start_index + 1
    return BarGeometry(
        x=experiment.start_index * DAY_WIDTH + 2,
        top=bands.experiment_band_top + experiment.row * EXPERIMENT_ROW_HEIGHT,
        width=max(DAY_WIDTH, span_days * DAY_WIDTH - 4),
        height=EXPERIMENT_BAR_HEIGHT,
    )


def release_marker_top(release: PositionedRelease, bands: BandLayout) -> int:
    return bands.release_band_top + release.lane * RELEASE_LANE_HEIGHT


def today_index(timeline: TimelineLayout, now: pd.Timestamp) -> Optional[int]:
    """표시 구간 안에서 오늘의 인덱스. 구간 밖이면 None."""
    index = day_difference(timeline.start_date, truncate_to_day(now))
    if 0 <= index < timeline.total_days:
        return index
    return None


def window_days(timeline: TimelineLayout) -> List[pd.Timestamp]:
    return [add_days(timeline.start_date, idx) for idx in range(timeline.total_days)]


def month_markers(timeline: TimelineLayout) -> List[Tuple[int, pd.Timestamp]]:
    """첫 칸과 매월 1일 칸의 (인덱스, 날짜) 목록."""
    return [
        (idx, day)
        for idx, day in enumerate(window_days(timeline))
        if idx == 0 or day.day == 1
    ]
