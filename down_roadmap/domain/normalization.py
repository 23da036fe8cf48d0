"""
Notion 페이지 정규화 로직

Notion 쿼리 결과(페이지 JSON)를 ExperimentRecord / ReleaseRecord로 변환합니다.
Streamlit과 HTTP 의존성이 없는 순수한 도메인 로직입니다.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Mapping, Optional, Tuple

import pandas as pd

from ..common.dates import parse_calendar_date, to_iso_date
from .models import ExperimentRecord, ReleaseRecord

logger = logging.getLogger(__name__)

_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

Properties = Mapping[str, Any]


def parse_notion_date(value: Optional[str]) -> Optional[pd.Timestamp]:
    """
    Notion 날짜 문자열을 UTC 기준 Timestamp로 변환합니다.

    - "YYYY-MM-DD": 해당 날짜의 UTC 자정
    - 시간/오프셋이 포함된 값: UTC로 변환한 시각
    - 비어있거나 해석할 수 없는 값: None
    """
    if not value:
        return None
    if _ISO_DATE_PATTERN.match(value):
        return parse_calendar_date(value)
    parsed = pd.to_datetime(value, utc=True, errors="coerce")
    if pd.isna(parsed):
        return None
    return parsed.tz_localize(None)


def get_title(properties: Properties, key: str = "Name") -> str:
    prop = properties.get(key) or {}
    parts = prop.get("title") or []
    value = "".join(part.get("plain_text") or "" for part in parts).strip()
    return value or "Untitled"


def get_date_range(
    properties: Properties, key: str = "Dates"
) -> Tuple[Optional[pd.Timestamp], Optional[pd.Timestamp]]:
    """날짜 속성의 (start, end)를 반환합니다. end가 없으면 start를 사용합니다."""
    prop = properties.get(key) or {}
    date_value = prop.get("date") or {}
    start = parse_notion_date(date_value.get("start"))
    end = parse_notion_date(date_value.get("end"))
    return start, (end if end is not None else start)


def get_status(properties: Properties, key: str) -> str:
    prop = properties.get(key) or {}
    status = prop.get("status") or {}
    return (status.get("name") or "").strip()


def get_select(properties: Properties, key: str) -> str:
    prop = properties.get(key) or {}
    select = prop.get("select") or {}
    return (select.get("name") or "").strip()


def normalize_experiment(page: Mapping[str, Any]) -> Optional[ExperimentRecord]:
    """실험 페이지 하나를 레코드로 변환합니다. 시작일이 없으면 None."""
    properties = page.get("properties") or {}
    start, end = get_date_range(properties, "Dates")
    if start is None or end is None:
        return None
    return ExperimentRecord(
        id=str(page.get("id", "")),
        name=get_title(properties, "Name"),
        url=str(page.get("url", "")),
        start_date=to_iso_date(start),
        end_date=to_iso_date(end),
        stage=get_status(properties, "Stage"),
    )


def normalize_release(page: Mapping[str, Any]) -> Optional[ReleaseRecord]:
    """릴리스 페이지 하나를 레코드로 변환합니다. 날짜가 없으면 None."""
    properties = page.get("properties") or {}
    start, _ = get_date_range(properties, "Dates")
    if start is None:
        return None
    return ReleaseRecord(
        id=str(page.get("id", "")),
        name=get_title(properties, "Name"),
        url=str(page.get("url", "")),
        date=to_iso_date(start),
        platform=get_select(properties, "Platform"),
        status=get_status(properties, "Status"),
    )


def normalize_experiments(pages: Iterable[Mapping[str, Any]]) -> Tuple[ExperimentRecord, ...]:
    pages = list(pages)
    records = tuple(r for r in (normalize_experiment(p) for p in pages) if r is not None)
    if len(records) < len(pages):
        logger.debug(f"Dropped {len(pages) - len(records)} experiment pages without dates")
    return records


def normalize_releases(pages: Iterable[Mapping[str, Any]]) -> Tuple[ReleaseRecord, ...]:
    pages = list(pages)
    records = tuple(r for r in (normalize_release(p) for p in pages) if r is not None)
    if len(records) < len(pages):
        logger.debug(f"Dropped {len(pages) - len(records)} release pages without dates")
    return records
