"""
Down Roadmap 메인 엔트리 포인트

Notion의 실험/릴리스 데이터소스를 읽어 하나의 타임라인으로 보여주고,
같은 레이아웃을 SVG로 내보냅니다.

실행:
    streamlit run roadmap_app.py
"""

from __future__ import annotations

import logging

import pandas as pd
import streamlit as st

# 로깅 설정
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from down_roadmap.common import measure_time_context, utc_now
from down_roadmap.core.config import CONFIG
from down_roadmap.data_sources import ensure_roadmap_data
from down_roadmap.data_sources.session import REFRESH_TRIGGER_KEY
from down_roadmap.domain import DomainError
from down_roadmap.planning import layout_timeline
from down_roadmap.ui import (
    VARIANTS,
    VariantSettings,
    build_error_svg,
    build_timeline_svg,
    export_filename,
    handle_domain_errors,
    render_error_panel,
    render_record_tables,
    render_timeline_view,
    resolve_variant,
)

VARIANT_LABELS = {
    "default": "기본 (100%)",
    "small": "Figma small (74%)",
    "tiny": "Figma tiny (60%)",
}


def _render_sidebar() -> VariantSettings:
    """사이드바(새로 고침, 내보내기 크기)를 렌더링하고 선택된 변형을 반환합니다."""
    with st.sidebar:
        if st.button("🔄 Notion 새로고침", key="sidebar_notion_refresh", use_container_width=True):
            st.session_state[REFRESH_TRIGGER_KEY] = True
            st.rerun()

        st.divider()
        st.header("SVG 내보내기")
        variant_id = st.radio(
            "글자 크기",
            [variant.id for variant in VARIANTS],
            format_func=lambda value: VARIANT_LABELS.get(value, value),
            key="svg_variant",
        )
        st.caption("변형은 SVG 글자 크기에만 적용되며 배치는 동일합니다.")

    return resolve_variant(variant_id)


def _render_download(svg: str, file_name: str, *, label: str = "Export SVG") -> None:
    st.download_button(
        label,
        data=svg.encode("utf-8"),
        file_name=file_name,
        mime="image/svg+xml",
        key="svg_download",
    )


def main() -> None:
    """Entrypoint for running the roadmap dashboard in Streamlit."""

    st.set_page_config(page_title=CONFIG.view.title, layout="wide")

    # 한 번의 실행 안에서는 같은 기준 시각을 로더, 레이아웃, 렌더러에 전달
    now: pd.Timestamp = utc_now()
    variant = _render_sidebar()
    st.title(CONFIG.view.title)

    # ========================================
    # 1단계: Notion 데이터 로드
    # ========================================
    try:
        data = ensure_roadmap_data(now)
    except DomainError as exc:
        # 데이터가 없으면 레이아웃을 계산하지 않고 오류 화면만 표시
        logger.error(f"Failed to load roadmap data: {exc}", exc_info=True)
        render_error_panel(str(exc))
        _render_download(build_error_svg(str(exc)), export_filename(variant, now))
        return

    with handle_domain_errors():
        # ========================================
        # 2단계: 레이아웃 계산
        # ========================================
        with measure_time_context("Timeline layout"):
            timeline = layout_timeline(
                data.experiments, data.releases, data.window_start, now=now
            )

        # ========================================
        # 3단계: SVG 내보내기 + 인터랙티브 뷰
        # ========================================
        svg = build_timeline_svg(data, timeline, variant, now=now)
        _render_download(svg, export_filename(variant, now))

        render_timeline_view(data, timeline, now=now)

        with st.expander("상세 목록", expanded=False):
            render_record_tables(timeline)


if __name__ == "__main__":
    main()
