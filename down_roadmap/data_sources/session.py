"""
세션/캐시 관리

Streamlit 캐시로 Notion 조회 결과를 재사용하고,
사이드바의 새로 고침 버튼이 눌리면 캐시를 비웁니다.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import pandas as pd
import streamlit as st

from ..common.dates import parse_calendar_date, to_iso_date
from ..core.config import CONFIG, NotionSettings, resolve_notion_settings
from ..domain.models import RoadmapData
from .loader import load_roadmap_data
from .notion import NotionClient

logger = logging.getLogger(__name__)

REFRESH_TRIGGER_KEY = "_trigger_refresh"
SOURCE_SESSION_KEY = "_roadmap_loaded_at"


def notion_secrets() -> Optional[Mapping[str, Any]]:
    """secrets.toml의 [notion] 섹션. 파일이나 섹션이 없으면 None."""
    try:
        section = st.secrets.get("notion")
    except Exception:  # secrets.toml이 없으면 접근 자체가 실패함
        return None
    return dict(section) if section else None


@st.cache_data(ttl=CONFIG.view.cache_ttl_seconds, show_spinner=False)
def fetch_roadmap_data(settings: NotionSettings, today: str) -> RoadmapData:
    """
    Notion 조회 결과를 캐시합니다.

    ``today``는 날짜가 바뀌면 캐시가 갱신되도록 하는 키 역할도 합니다.
    """
    client = NotionClient(settings.token)
    return load_roadmap_data(client, settings, now=parse_calendar_date(today))


def ensure_roadmap_data(now: pd.Timestamp) -> RoadmapData:
    """
    캐시된 로드맵 데이터를 반환하고, 새로 고침 요청이 있으면 다시 조회합니다.

    Session State Keys:
        - _trigger_refresh: 사이드바 새로 고침 버튼이 설정하는 플래그
        - _roadmap_loaded_at: 마지막으로 데이터를 읽은 기준 날짜

    Raises:
        ConfigurationError: Notion 설정이 없을 때
        DataLoadError: Notion 조회 실패 시
    """
    settings = resolve_notion_settings(notion_secrets())

    if st.session_state.get(REFRESH_TRIGGER_KEY, False):
        st.session_state[REFRESH_TRIGGER_KEY] = False
        logger.info("Refresh requested, clearing cached roadmap data")
        fetch_roadmap_data.clear()

    today = to_iso_date(now)
    with st.spinner("Notion 데이터 불러오는 중..."):
        data = fetch_roadmap_data(settings, today)

    st.session_state[SOURCE_SESSION_KEY] = today
    return data
