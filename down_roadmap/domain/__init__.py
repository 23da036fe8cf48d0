"""
도메인 계층 퍼블릭 API

이 모듈은 도메인 계층의 주요 클래스와 함수를 재수출하여
일관된 퍼블릭 API를 제공합니다.
"""
from __future__ import annotations

from .exceptions import ConfigurationError, DataLoadError, DomainError, LayoutError
from .models import (
    BandLayout,
    ExperimentRecord,
    PositionedExperiment,
    PositionedRelease,
    ReleaseRecord,
    RoadmapData,
    TimelineLayout,
)
from .normalization import (
    normalize_experiment,
    normalize_experiments,
    normalize_release,
    normalize_releases,
    parse_notion_date,
)

__all__ = [
    # 예외
    "DomainError",
    "ConfigurationError",
    "DataLoadError",
    "LayoutError",
    # 모델
    "ExperimentRecord",
    "ReleaseRecord",
    "RoadmapData",
    "PositionedExperiment",
    "PositionedRelease",
    "TimelineLayout",
    "BandLayout",
    # 정규화
    "parse_notion_date",
    "normalize_experiment",
    "normalize_experiments",
    "normalize_release",
    "normalize_releases",
]
