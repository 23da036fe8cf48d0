"""Configuration and constants for the Down Roadmap dashboard.

레이아웃 픽셀 상수, Notion API 설정, 화면 관련 설정을 제공합니다.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..domain.exceptions import ConfigurationError

# ============================================================
# 타임라인 레이아웃 상수 (픽셀)
# ============================================================

DAY_WIDTH = 34
EXPERIMENT_ROW_HEIGHT = 40
EXPERIMENT_BAR_HEIGHT = 30
RELEASE_LANE_HEIGHT = 28
HEADER_HEIGHT = 74

# 밴드 배치
EXPERIMENT_BAND_TOP = 18
EXPERIMENT_BAND_PADDING = 10
RELEASE_BAND_GAP = 44
RELEASE_BAND_EXTRA_HEIGHT = 50
BODY_BOTTOM_PADDING = 24

# 릴리스 라벨 폭 추정 및 레인 간격
RELEASE_LABEL_CHAR_WIDTH = 7
RELEASE_LABEL_PADDING = 44
RELEASE_LABEL_MIN_WIDTH = 92
RELEASE_LABEL_MAX_WIDTH = 240
RELEASE_LABEL_GUTTER = 12
RELEASE_LABEL_TRAILING_SPACE = 20


# ============================================================
# Notion 설정
# ============================================================

TOKEN_ENV_VARS = ("NOTION_API_TOKEN", "NOTION_INTEGRATION_SECRET")
EXPERIMENTS_SOURCE_ENV = "NOTION_DATASOURCE_EXPERIMENTS"
RELEASES_SOURCE_ENV = "NOTION_DATASOURCE_RELEASES"


@dataclass(frozen=True)
class NotionConfig:
    """Notion API 호출 관련 설정"""

    api_base: str = "https://api.notion.com/v1"

    # Notion-Version 헤더 값
    version: str = "2025-09-03"

    # 페이지당 조회 건수 (API 최대값)
    page_size: int = 100

    # 요청 타임아웃 (초)
    timeout_seconds: float = 30.0

    # 조회 엔드포인트 우선순위 (data_sources가 실패하면 databases로 폴백)
    endpoint_kinds: tuple[str, ...] = ("data_sources", "databases")

    # 폴백 대상 응답 코드
    fallback_statuses: tuple[int, ...] = (400, 404)

    # 릴리스 조회 시 사용하는 상태값
    released_status: str = "Released"


@dataclass(frozen=True)
class ViewConfig:
    """화면 표시 관련 설정"""

    title: str = "Down Roadmap"

    # 조회 시작일: 오늘로부터 N개월 전
    window_months: int = 3

    # Notion 조회 결과 캐시 유지 시간 (초)
    cache_ttl_seconds: int = 300

    # 실험 막대 라벨 최소 글자 수
    min_bar_label_chars: int = 20

    font_family: str = "Inter, Segoe UI, Arial, sans-serif"


@dataclass(frozen=True)
class RoadmapConfig:
    """대시보드 전역 설정"""

    notion: NotionConfig = field(default_factory=NotionConfig)
    view: ViewConfig = field(default_factory=ViewConfig)


# 전역 설정 객체 (불변)
CONFIG = RoadmapConfig()


# ============================================================
# 인증 정보 / 데이터소스 ID
# ============================================================

@dataclass(frozen=True)
class NotionSettings:
    """Credentials and database ids needed to query Notion."""

    token: str
    experiments_source: str
    releases_source: str


def _secret_value(secrets: Optional[Mapping[str, Any]], key: str) -> str:
    if not secrets:
        return ""
    value = secrets.get(key)
    return str(value).strip() if value else ""


def resolve_notion_settings(
    secrets: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> NotionSettings:
    """
    Streamlit secrets의 [notion] 섹션 또는 환경변수에서 Notion 설정을 읽습니다.

    secrets 값이 있으면 우선 사용하고, 없으면 환경변수를 확인합니다.

    Args:
        secrets: ``api_token``, ``experiments_source``, ``releases_source`` 키를 가진 매핑
        environ: 환경변수 매핑 (기본값: ``os.environ``)

    Returns:
        NotionSettings 인스턴스

    Raises:
        ConfigurationError: 토큰이나 데이터소스 ID가 없을 때
    """
    env = os.environ if environ is None else environ

    token = _secret_value(secrets, "api_token")
    if not token:
        token = next((env[name] for name in TOKEN_ENV_VARS if env.get(name)), "")
    if not token:
        raise ConfigurationError(
            "Missing Notion token. Set NOTION_API_TOKEN or NOTION_INTEGRATION_SECRET."
        )

    def _source(secret_key: str, env_name: str) -> str:
        value = _secret_value(secrets, secret_key) or env.get(env_name, "")
        if not value:
            raise ConfigurationError(f"Missing required env var: {env_name}")
        return value

    return NotionSettings(
        token=token,
        experiments_source=_source("experiments_source", EXPERIMENTS_SOURCE_ENV),
        releases_source=_source("releases_source", RELEASES_SOURCE_ENV),
    )
