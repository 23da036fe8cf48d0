"""
레코드 상세 테이블 렌더링

타임라인 아래에 실험/릴리스 목록을 배치 결과(행/레인)와 함께 표로 보여줍니다.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import streamlit as st

from ..common.text import compact_release_label
from ..domain.models import PositionedExperiment, PositionedRelease, TimelineLayout
from ..planning.tones import platform_tone, stage_tone

EXPERIMENT_COLUMNS = ["name", "stage", "tone", "start_date", "end_date", "days", "row", "url"]
RELEASE_COLUMNS = ["name", "label", "platform", "tone", "date", "status", "lane", "url"]


def experiments_frame(experiments: Sequence[PositionedExperiment]) -> pd.DataFrame:
    """
    배치된 실험 목록을 DataFrame으로 변환합니다.

    Returns:
        EXPERIMENT_COLUMNS 컬럼을 가진 DataFrame (시작일 순)
    """
    if not experiments:
        return pd.DataFrame(columns=EXPERIMENT_COLUMNS)

    frame = pd.DataFrame(
        [
            {
                "name": exp.name,
                "stage": exp.stage,
                "tone": stage_tone(exp.stage),
                "start_date": exp.start_date,
                "end_date": exp.end_date,
                "days": exp.end_index - exp.start_index + 1,
                "row": exp.row,
                "url": exp.url,
            }
            for exp in experiments
        ]
    )
    frame["start_date"] = pd.to_datetime(frame["start_date"], errors="coerce")
    frame["end_date"] = pd.to_datetime(frame["end_date"], errors="coerce")
    return frame[EXPERIMENT_COLUMNS]


def releases_frame(releases: Sequence[PositionedRelease]) -> pd.DataFrame:
    """배치된 릴리스 목록을 DataFrame으로 변환합니다 (날짜 순)."""
    if not releases:
        return pd.DataFrame(columns=RELEASE_COLUMNS)

    frame = pd.DataFrame(
        [
            {
                "name": rel.name,
                "label": compact_release_label(rel.name),
                "platform": rel.platform,
                "tone": platform_tone(rel.platform),
                "date": rel.date,
                "status": rel.status,
                "lane": rel.lane,
                "url": rel.url,
            }
            for rel in releases
        ]
    )
    frame["date"] = pd.to_datetime(frame["date"], errors="coerce")
    return frame[RELEASE_COLUMNS]


def render_record_tables(timeline: TimelineLayout) -> None:
    """실험/릴리스 상세 표를 두 개의 컬럼으로 렌더링합니다."""
    left, right = st.columns(2)

    with left:
        st.subheader("Experiments")
        st.dataframe(
            experiments_frame(timeline.positioned_experiments),
            hide_index=True,
            use_container_width=True,
            column_config={"url": st.column_config.LinkColumn("url")},
        )

    with right:
        st.subheader("Releases")
        st.dataframe(
            releases_frame(timeline.positioned_releases),
            hide_index=True,
            use_container_width=True,
            column_config={"url": st.column_config.LinkColumn("url")},
        )
