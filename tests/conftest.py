"""
공통 픽스처

- 프로젝트 루트를 sys.path에 추가합니다.
- 테스트용 Notion 환경변수를 설정합니다.
- 레이아웃 테스트에 쓰는 샘플 레코드를 제공합니다.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from down_roadmap.domain.models import RoadmapData  # noqa: E402
from factories import make_experiment, make_release  # noqa: E402


def pytest_configure(config):
    """pytest 초기화 시점에 실행되어 테스트 수집 전에 환경을 준비합니다.

    실제 Notion 자격 증명이 없어도 설정 해석 코드가 동작하도록
    테스트용 값을 채워 둡니다.
    """
    os.environ.setdefault("NOTION_API_TOKEN", "test-token-for-pytest")
    os.environ.setdefault("NOTION_DATASOURCE_EXPERIMENTS", "exp-source-for-pytest")
    os.environ.setdefault("NOTION_DATASOURCE_RELEASES", "rel-source-for-pytest")


@pytest.fixture
def now() -> pd.Timestamp:
    """테스트 기준 시각 (2024-01-05 금요일 오후)"""
    return pd.Timestamp("2024-01-05 15:30:00")


@pytest.fixture
def sample_data() -> RoadmapData:
    """겹치는 실험 2건과 릴리스 1건"""
    return RoadmapData(
        experiments=(
            make_experiment("2024-01-03", "2024-01-10", name="Checkout A & B", stage="Running"),
            make_experiment("2024-01-05", "2024-01-08", name="Onboarding v2", stage="Winner - Ended"),
        ),
        releases=(make_release("2024-01-01", name="Growth Backend 2.3.1 rollout", platform="Backend"),),
        window_start="2024-01-01",
        window_end="2024-01-05",
    )
