"""
로드맵 데이터 로더

Notion의 실험/릴리스 데이터소스에서 최근 N개월 구간의 레코드를 불러와
RoadmapData로 묶어 반환합니다.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import pandas as pd

from ..common.dates import to_iso_date, truncate_to_day, utc_now
from ..common.performance import measure_time_context
from ..core.config import CONFIG, NotionSettings
from ..domain.models import RoadmapData
from ..domain.normalization import normalize_experiments, normalize_releases
from .notion import NotionClient

logger = logging.getLogger(__name__)


def window_start_for(now: pd.Timestamp, months: int = CONFIG.view.window_months) -> pd.Timestamp:
    """
    조회 시작일: now로부터 months개월 전의 UTC 자정.

    해당 월에 같은 날짜가 없으면 월말로 맞춥니다 (5월 31일 → 2월 29일).
    다음 달로 넘기지 않으므로 3월 2일부터 조회하지 않습니다.
    """
    return truncate_to_day(now) - pd.DateOffset(months=months)


def _dates_filter(window_start: str) -> list[Dict[str, Any]]:
    return [
        {"property": "Dates", "date": {"on_or_after": window_start}},
        {"property": "Dates", "date": {"is_not_empty": True}},
    ]


def experiments_query(window_start: str) -> Dict[str, Any]:
    return {
        "filter": {"and": _dates_filter(window_start)},
        "sorts": [{"property": "Dates", "direction": "ascending"}],
    }


def releases_query(window_start: str) -> Dict[str, Any]:
    released = {"property": "Status", "status": {"equals": CONFIG.notion.released_status}}
    return {
        "filter": {"and": [*_dates_filter(window_start), released]},
        "sorts": [{"property": "Dates", "direction": "ascending"}],
    }


def load_roadmap_data(
    client: NotionClient,
    settings: NotionSettings,
    *,
    now: Optional[pd.Timestamp] = None,
) -> RoadmapData:
    """
    Notion에서 실험과 릴리스를 조회하고 레코드로 정규화합니다.

    Args:
        client: Notion 클라이언트
        settings: 데이터소스 ID가 담긴 설정
        now: 기준 시각 (기본값: 현재 UTC 시각)

    Returns:
        RoadmapData 인스턴스

    Raises:
        DataLoadError: Notion 조회 실패 시
    """
    now = utc_now() if now is None else now
    window_start = to_iso_date(window_start_for(now))
    window_end = to_iso_date(now)

    logger.info(f"Loading roadmap data from Notion (window start {window_start})")

    with measure_time_context("Notion experiments query"):
        experiment_pages = client.query_source(
            settings.experiments_source, experiments_query(window_start)
        )
    with measure_time_context("Notion releases query"):
        release_pages = client.query_source(settings.releases_source, releases_query(window_start))

    experiments = normalize_experiments(experiment_pages)
    releases = normalize_releases(release_pages)
    logger.info(f"Roadmap data loaded: {len(experiments)} experiments, {len(releases)} releases")

    return RoadmapData(
        experiments=experiments,
        releases=releases,
        window_start=window_start,
        window_end=window_end,
    )
