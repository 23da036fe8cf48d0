"""
도메인 모델: Down Roadmap의 핵심 데이터 구조

이 모듈은 Notion에서 읽어온 레코드와 레이아웃 엔진의 결과물을 정의합니다.
모든 모델은 불변(frozen) 데이터클래스로 구현되어 두 렌더러가 같은 값을
안전하게 공유할 수 있도록 합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple

import pandas as pd


def _record_values(record: Any) -> Dict[str, Any]:
    return {f.name: getattr(record, f.name) for f in fields(record)}


@dataclass(frozen=True)
class ExperimentRecord:
    """
    실험 한 건을 나타내는 레코드.

    Attributes:
        id: Notion 페이지 ID
        name: 실험 이름
        url: Notion 페이지 URL
        start_date: 시작일 (YYYY-MM-DD)
        end_date: 종료일 (YYYY-MM-DD, 시작일 포함 범위)
        stage: 진행 단계 (자유 텍스트, 톤 분류에 사용)
    """

    id: str
    name: str
    url: str
    start_date: str
    end_date: str
    stage: str


@dataclass(frozen=True)
class ReleaseRecord:
    """
    릴리스 한 건을 나타내는 레코드.

    Attributes:
        id: Notion 페이지 ID
        name: 릴리스 이름 (예: "Growth Backend 2.3.1 rollout")
        url: Notion 페이지 URL
        date: 릴리스 날짜 (YYYY-MM-DD)
        platform: 플랫폼 (자유 텍스트)
        status: 상태값
    """

    id: str
    name: str
    url: str
    date: str
    platform: str
    status: str


@dataclass(frozen=True)
class RoadmapData:
    """데이터 소스가 반환하는 결과 묶음."""

    experiments: Tuple[ExperimentRecord, ...]
    releases: Tuple[ReleaseRecord, ...]
    window_start: str
    window_end: str


@dataclass(frozen=True)
class PositionedExperiment(ExperimentRecord):
    """행(row)과 일자 인덱스가 배정된 실험."""

    row: int
    start_index: int
    end_index: int

    @classmethod
    def from_record(
        cls, record: ExperimentRecord, *, row: int, start_index: int, end_index: int
    ) -> "PositionedExperiment":
        return cls(
            **_record_values(record), row=row, start_index=start_index, end_index=end_index
        )


@dataclass(frozen=True)
class PositionedRelease(ReleaseRecord):
    """레인(lane)과 일자 인덱스가 배정된 릴리스."""

    lane: int
    day_index: int
    label_end: int

    @classmethod
    def from_record(
        cls, record: ReleaseRecord, *, lane: int, day_index: int, label_end: int
    ) -> "PositionedRelease":
        return cls(
            **_record_values(record), lane=lane, day_index=day_index, label_end=label_end
        )


@dataclass(frozen=True)
class TimelineLayout:
    """
    레이아웃 엔진의 결과물.

    렌더링할 때마다 새로 계산되며 생성 이후 변경되지 않습니다.

    Attributes:
        start_date: 표시 구간 시작일 (UTC 자정)
        end_date: 표시 구간 종료일 (UTC 자정)
        total_days: 표시 일수 (start_date와 end_date 포함, 최소 1)
        positioned_experiments: 시작일 순으로 정렬된 실험 배치 결과
        positioned_releases: 날짜 순으로 정렬된 릴리스 배치 결과
        experiment_rows: 사용된 실험 행 수 (최소 1)
        release_lanes: 사용된 릴리스 레인 수 (최소 1)
        canvas_width: 캔버스 폭 (픽셀)
    """

    start_date: pd.Timestamp
    end_date: pd.Timestamp
    total_days: int
    positioned_experiments: Tuple[PositionedExperiment, ...]
    positioned_releases: Tuple[PositionedRelease, ...]
    experiment_rows: int
    release_lanes: int
    canvas_width: int


@dataclass(frozen=True)
class BandLayout:
    """실험/릴리스 밴드의 세로 오프셋과 본문 높이 (픽셀)."""

    experiment_band_top: int
    experiment_band_height: int
    release_band_top: int
    release_band_height: int
    body_height: int
