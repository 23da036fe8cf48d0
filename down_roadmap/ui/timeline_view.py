"""인터랙티브 타임라인 뷰 렌더링 모듈.

레이아웃 결과를 절대 위치로 배치한 HTML 요소로 변환해 Streamlit 페이지에 그립니다.
좌표는 SVG 내보내기와 같은 ``planning.geometry`` 함수를 사용합니다.
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd
import streamlit as st

from ..common.dates import is_weekend, utc_now
from ..common.text import compact_release_label, format_human_date, format_month, truncate_label
from ..core.config import CONFIG, DAY_WIDTH, HEADER_HEIGHT
from ..domain.models import BandLayout, RoadmapData, TimelineLayout
from ..planning.bands import band_layout
from ..planning.geometry import (
    experiment_bar,
    month_markers,
    release_anchor_x,
    release_marker_top,
    today_index,
    window_days,
)
from ..planning.tones import platform_tone, stage_tone
from .formatters import escape
from .styles import inject_roadmap_styles

REQUIRED_ENV_HINT = (
    "Set <code>NOTION_API_TOKEN</code>, <code>NOTION_DATASOURCE_EXPERIMENTS</code>, "
    "and <code>NOTION_DATASOURCE_RELEASES</code>."
)


def build_summary_html(data: RoadmapData, timeline: TimelineLayout) -> str:
    return (
        '<div class="roadmap-summary">'
        f"<span>{len(data.experiments)} experiments</span>"
        f"<span>{len(data.releases)} releases</span>"
        f"<span>{format_human_date(timeline.start_date)} - {format_human_date(timeline.end_date)}</span>"
        "</div>"
    )


def _header_html(timeline: TimelineLayout) -> str:
    months = "".join(
        f'<span class="month-label" style="left:{idx * DAY_WIDTH + 6}px">{format_month(day)}</span>'
        for idx, day in month_markers(timeline)
    )
    day_labels: List[str] = []
    for idx, day in enumerate(window_days(timeline)):
        classes = "day-label weekend" if is_weekend(day) else "day-label"
        day_labels.append(
            f'<span class="{classes}" style="left:{idx * DAY_WIDTH}px;width:{DAY_WIDTH}px">{day.day}</span>'
        )
    return (
        f'<div class="timeline-header" style="height:{HEADER_HEIGHT}px">'
        f'<div class="month-row">{months}</div>'
        f'<div class="day-row">{"".join(day_labels)}</div>'
        "</div>"
    )


def _grid_html(timeline: TimelineLayout) -> str:
    columns: List[str] = []
    for idx, day in enumerate(window_days(timeline)):
        classes = ["grid-column"]
        if is_weekend(day):
            classes.append("weekend")
        if day.day == 1:
            classes.append("month-start")
        columns.append(
            f'<span class="{" ".join(classes)}" style="left:{idx * DAY_WIDTH}px;width:{DAY_WIDTH}px"></span>'
        )
    return f'<div class="grid-layer">{"".join(columns)}</div>'


def _experiments_html(timeline: TimelineLayout, bands: BandLayout) -> str:
    items: List[str] = []
    for exp in timeline.positioned_experiments:
        bar = experiment_bar(exp, bands)
        tone = stage_tone(exp.stage)
        title = f"{exp.name} ({exp.stage})" if exp.stage else exp.name
        name = truncate_label(exp.name, max(CONFIG.view.min_bar_label_chars, bar.width // 8))
        badge = f'<span class="stage-badge tone-{tone}">{escape(exp.stage)}</span>' if exp.stage else ""
        items.append(
            f'<a href="{escape(exp.url)}" target="_blank" rel="noopener noreferrer" '
            f'class="experiment-bar tone-{tone}" title="{escape(title)}" '
            f'style="left:{bar.x}px;top:{bar.top}px;width:{bar.width}px;height:{bar.height}px">'
            f'<span class="experiment-name">{escape(name)}</span>{badge}</a>'
        )
    return "".join(items)


def _releases_html(timeline: TimelineLayout, bands: BandLayout) -> str:
    items: List[str] = []
    for release in timeline.positioned_releases:
        x = release_anchor_x(release.day_index)
        y = release_marker_top(release, bands)
        platform = platform_tone(release.platform)
        title = f"{release.name} ({release.platform})" if release.platform else release.name
        tag = (
            f'<em class="platform-tag platform-{platform}">{escape(release.platform)}</em>'
            if release.platform
            else ""
        )
        items.append(
            f'<a href="{escape(release.url)}" target="_blank" rel="noopener noreferrer" '
            f'class="release-item" title="{escape(title)}" style="left:{x}px;top:{y}px">'
            f'<span class="release-point platform-{platform}"></span>'
            f'<span class="release-label">{escape(compact_release_label(release.name))}{tag}</span></a>'
        )
    return "".join(items)


def build_timeline_html(
    data: RoadmapData,
    timeline: TimelineLayout,
    *,
    now: Optional[pd.Timestamp] = None,
) -> str:
    """
    타임라인 전체를 HTML 문자열로 만듭니다.

    Streamlit의 markdown 파서가 들여쓰기를 코드 블록으로 해석하지 않도록
    줄바꿈 없이 이어 붙입니다.

    Args:
        data: 원본 레코드 묶음
        timeline: ``layout_timeline`` 결과
        now: 오늘 표시선 기준 시각

    Returns:
        요약 영역과 타임라인 캔버스를 포함한 HTML
    """
    now = utc_now() if now is None else now
    bands = band_layout(timeline)

    today = today_index(timeline, now)
    today_line = ""
    if today is not None:
        today_line = (
            f'<span class="today-line" style="left:{release_anchor_x(today)}px;'
            f'height:{bands.body_height}px"></span>'
        )

    body = (
        f'<div class="timeline-body" style="top:{HEADER_HEIGHT}px;height:{bands.body_height}px">'
        f"{_grid_html(timeline)}"
        f"{today_line}"
        f'<div class="band-label" style="top:{bands.experiment_band_top - 16}px">Experiments</div>'
        f"{_experiments_html(timeline, bands)}"
        f'<div class="release-divider" style="top:{bands.release_band_top - 14}px">Releases</div>'
        f"{_releases_html(timeline, bands)}"
        "</div>"
    )

    return (
        f"{build_summary_html(data, timeline)}"
        '<section class="timeline-viewport" aria-label="Roadmap timeline">'
        f'<div class="timeline-canvas" style="width:{timeline.canvas_width}px;'
        f'height:{HEADER_HEIGHT + bands.body_height}px">'
        f"{_header_html(timeline)}{body}"
        "</div></section>"
    )


def build_error_panel(message: str) -> str:
    """데이터를 불러오지 못했을 때 타임라인 대신 표시할 오류 카드."""
    return (
        '<section class="error-card">'
        f"<h1>{escape(CONFIG.view.title)}</h1>"
        f'<p class="error-title">{escape(message)}</p>'
        f"<p>{REQUIRED_ENV_HINT}</p>"
        "</section>"
    )


def render_timeline_view(
    data: RoadmapData, timeline: TimelineLayout, *, now: Optional[pd.Timestamp] = None
) -> None:
    inject_roadmap_styles()
    st.markdown(build_timeline_html(data, timeline, now=now), unsafe_allow_html=True)


def render_error_panel(message: str) -> None:
    inject_roadmap_styles()
    st.markdown(build_error_panel(message), unsafe_allow_html=True)
