"""SVG export of the roadmap timeline.

Builds a standalone SVG document from a ``TimelineLayout``. All positions
come from ``planning.geometry`` so the export lines up with the interactive
view; the size variant only changes font sizes.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import pandas as pd

from ..common.dates import is_weekend, to_iso_date, utc_now
from ..common.text import compact_release_label, format_human_date, format_month, truncate_label
from ..core.config import CONFIG, DAY_WIDTH, HEADER_HEIGHT
from ..domain.exceptions import LayoutError
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
from . import palette
from .formatters import escape, format_number as num, round_half_up
from .variants import DEFAULT_VARIANT, VariantSettings, font_size

logger = logging.getLogger(__name__)

FONT = CONFIG.view.font_family
MONTH_ROW_HEIGHT = 34


def summary_text(data: RoadmapData, timeline: TimelineLayout) -> str:
    return (
        f"{len(data.experiments)} experiments • {len(data.releases)} releases • "
        f"{format_human_date(timeline.start_date)} - {format_human_date(timeline.end_date)}"
    )


def experiment_label(name: str, stage: str) -> str:
    return f"{name} · {stage}" if stage else name


def export_filename(variant: VariantSettings, now: Optional[pd.Timestamp] = None) -> str:
    """``down-roadmap[-tag]-YYYY-MM-DD.svg``"""
    suffix = f"-{variant.filename_tag}" if variant.filename_tag else ""
    return f"down-roadmap{suffix}-{to_iso_date(utc_now() if now is None else now)}.svg"


def _grid_columns(timeline: TimelineLayout, bands: BandLayout, total_height: int) -> List[str]:
    parts: List[str] = []
    for idx, day in enumerate(window_days(timeline)):
        x = idx * DAY_WIDTH
        fill = "rgba(255, 255, 255, 0.05)" if is_weekend(day) else "rgba(255, 255, 255, 0.02)"
        parts.append(
            f'<rect x="{x}" y="{HEADER_HEIGHT}" width="{DAY_WIDTH}" height="{bands.body_height}" fill="{fill}"/>'
        )
        parts.append(
            f'<line x1="{x + DAY_WIDTH}" y1="{HEADER_HEIGHT}" x2="{x + DAY_WIDTH}" y2="{total_height}" '
            'stroke="rgba(255,255,255,0.04)" stroke-width="1"/>'
        )
        if day.day == 1:
            parts.append(
                f'<line x1="{x}" y1="{HEADER_HEIGHT}" x2="{x}" y2="{total_height}" '
                'stroke="rgba(255,255,255,0.12)" stroke-width="1"/>'
            )
    return parts


def _header_labels(timeline: TimelineLayout, variant: VariantSettings) -> List[str]:
    month_size = font_size("month", variant)
    day_size = font_size("day", variant)
    month_y = 8 + month_size * 0.9
    day_y = MONTH_ROW_HEIGHT + 8 + day_size * 0.9

    parts = [
        f'<text x="{idx * DAY_WIDTH + 6}" y="{num(month_y)}" fill="{palette.MONTH_TEXT}" '
        f'font-size="{num(month_size)}" font-weight="640" font-family="{FONT}">'
        f"{escape(format_month(day))}</text>"
        for idx, day in month_markers(timeline)
    ]
    for idx, day in enumerate(window_days(timeline)):
        color = palette.WEEKEND_DAY_TEXT if is_weekend(day) else palette.DAY_TEXT
        parts.append(
            f'<text x="{num(idx * DAY_WIDTH + DAY_WIDTH / 2)}" y="{num(day_y)}" fill="{color}" '
            f'font-size="{num(day_size)}" text-anchor="middle" font-family="{FONT}">{day.day}</text>'
        )
    return parts


def _experiment_bars(
    timeline: TimelineLayout, bands: BandLayout, variant: VariantSettings
) -> List[str]:
    text_size = font_size("experiment", variant)
    char_width = max(8 * variant.font_scale, 4.25)

    parts: List[str] = []
    for exp in timeline.positioned_experiments:
        bar = experiment_bar(exp, bands)
        y = HEADER_HEIGHT + bar.top
        colors = palette.stage_palette(stage_tone(exp.stage))
        max_chars = max(CONFIG.view.min_bar_label_chars, int(bar.width // char_width))
        text = truncate_label(experiment_label(exp.name, exp.stage), max_chars)
        parts.append(
            f'<a href="{escape(exp.url)}" target="_blank" rel="noopener noreferrer"><g>'
            f'<rect x="{bar.x}" y="{y}" width="{bar.width}" height="{bar.height}" rx="10" '
            f'fill="{colors.fill}" stroke="{colors.stroke}" stroke-width="1"/>'
            f'<text x="{bar.x + 10}" y="{num(y + 7 + text_size * 0.84)}" fill="{colors.text}" '
            f'font-size="{num(text_size)}" font-weight="530" font-family="{FONT}">{escape(text)}</text>'
            "</g></a>"
        )
    return parts


def _release_items(
    timeline: TimelineLayout, bands: BandLayout, variant: VariantSettings
) -> List[str]:
    text_size = font_size("release", variant)
    char_width = max(4.25, 7 * variant.font_scale)
    if variant.id == DEFAULT_VARIANT.id:
        label_height = 20
    else:
        label_height = max(14, int(round_half_up(20 * variant.font_scale)))

    parts: List[str] = []
    for release in timeline.positioned_releases:
        x = release_anchor_x(release.day_index)
        y = HEADER_HEIGHT + release_marker_top(release, bands)
        color = palette.platform_color(platform_tone(release.platform))
        tag = f" {release.platform}" if release.platform else ""
        label = f"{compact_release_label(release.name)}{tag}"
        label_width = max(88, min(280, len(label) * char_width + 24))
        label_y = y - int(round_half_up((label_height - 10) / 2))
        text_y = label_y + label_height / 2 + text_size * 0.36
        parts.append(
            f'<a href="{escape(release.url)}" target="_blank" rel="noopener noreferrer"><g>'
            f'<circle cx="{x}" cy="{y + 5}" r="5" fill="{color}" stroke="rgba(255,255,255,0.55)" stroke-width="1.5"/>'
            f'<rect x="{x + 10}" y="{label_y}" width="{num(label_width)}" height="{label_height}" rx="10" '
            'fill="rgba(20, 24, 32, 0.9)" stroke="rgba(255,255,255,0.16)"/>'
            f'<text x="{x + 20}" y="{num(text_y)}" fill="{palette.RELEASE_TEXT}" '
            f'font-size="{num(text_size)}" font-family="{FONT}">{escape(label)}</text>'
            "</g></a>"
        )
    return parts


def build_timeline_svg(
    data: RoadmapData,
    timeline: TimelineLayout,
    variant: VariantSettings = DEFAULT_VARIANT,
    *,
    now: Optional[pd.Timestamp] = None,
) -> str:
    """
    타임라인 전체를 SVG 문서로 렌더링합니다.

    Args:
        data: 원본 레코드 묶음 (요약 문구의 건수에 사용)
        timeline: ``layout_timeline`` 결과
        variant: 글자 크기 변형
        now: 오늘 표시선 기준 시각 (레이아웃 계산에 쓴 값과 같아야 함)

    Raises:
        LayoutError: 레이아웃 배치 건수가 데이터와 다를 때
    """
    if len(timeline.positioned_experiments) != len(data.experiments) or len(
        timeline.positioned_releases
    ) != len(data.releases):
        raise LayoutError("Timeline layout does not match the roadmap data it is rendered with")

    now = utc_now() if now is None else now
    bands = band_layout(timeline)
    total_width = timeline.canvas_width
    total_height = HEADER_HEIGHT + bands.body_height
    band_size = num(font_size("band", variant))

    today = today_index(timeline, now)
    today_line = ""
    if today is not None:
        today_x = release_anchor_x(today)
        today_line = (
            f'<line x1="{today_x}" y1="{HEADER_HEIGHT}" x2="{today_x}" y2="{total_height}" '
            f'stroke="{palette.TODAY_LINE}" stroke-width="2"/>'
        )

    experiments_label_y = HEADER_HEIGHT + bands.experiment_band_top - 8
    divider_y = HEADER_HEIGHT + bands.release_band_top - 14
    releases_label_y = HEADER_HEIGHT + bands.release_band_top - 2
    gradient_top, gradient_bottom = palette.HEADER_GRADIENT

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{total_width}" height="{total_height}" '
        f'viewBox="0 0 {total_width} {total_height}">',
        '<defs><linearGradient id="headerGradient" x1="0" y1="0" x2="0" y2="1">'
        f'<stop offset="0%" stop-color="{gradient_top}" /><stop offset="100%" stop-color="{gradient_bottom}" />'
        "</linearGradient></defs>",
        f'<rect x="0" y="0" width="{total_width}" height="{total_height}" fill="{palette.BACKGROUND}"/>',
        f'<rect x="0" y="0" width="{total_width}" height="{HEADER_HEIGHT}" fill="url(#headerGradient)"/>',
        f'<line x1="0" y1="{MONTH_ROW_HEIGHT}" x2="{total_width}" y2="{MONTH_ROW_HEIGHT}" stroke="rgba(255,255,255,0.1)"/>',
        f'<line x1="0" y1="{HEADER_HEIGHT}" x2="{total_width}" y2="{HEADER_HEIGHT}" stroke="rgba(255,255,255,0.12)"/>',
        *_grid_columns(timeline, bands, total_height),
        today_line,
        f'<text x="8" y="{experiments_label_y}" fill="{palette.BAND_LABEL_TEXT}" font-size="{band_size}" '
        f'letter-spacing="1" font-family="{FONT}">EXPERIMENTS</text>',
        f'<line x1="0" y1="{divider_y}" x2="{total_width}" y2="{divider_y}" stroke="rgba(255,255,255,0.12)"/>',
        f'<text x="8" y="{releases_label_y}" fill="{palette.BAND_LABEL_TEXT}" font-size="{band_size}" '
        f'letter-spacing="1" font-family="{FONT}">RELEASES</text>',
        *_experiment_bars(timeline, bands, variant),
        *_release_items(timeline, bands, variant),
        *_header_labels(timeline, variant),
        f'<text x="12" y="{total_height - 10}" fill="{palette.SUMMARY_TEXT}" '
        f'font-size="{num(font_size("summary", variant))}" font-family="{FONT}">'
        f"{escape(summary_text(data, timeline))}</text>",
        "</svg>",
    ]

    logger.debug(f"SVG export ({variant.id}): {total_width}x{total_height}")
    return "\n".join(line for line in lines if line)


def build_error_svg(message: str) -> str:
    """데이터를 불러오지 못했을 때 내보내는 오류 안내 SVG."""
    safe = escape(message)
    return "\n".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<svg xmlns="http://www.w3.org/2000/svg" width="1200" height="260" viewBox="0 0 1200 260">',
            '  <rect width="1200" height="260" fill="#0d0f14"/>',
            f'  <text x="24" y="56" fill="#e6e9ef" font-family="{FONT}" font-size="30" '
            f'font-weight="700">{escape(CONFIG.view.title)}</text>',
            '  <rect x="24" y="86" width="1152" height="150" rx="10" fill="#1a1f2a" stroke="#2c3445"/>',
            f'  <text x="42" y="126" fill="#d8dcea" font-family="{FONT}" font-size="20" '
            'font-weight="600">SVG export unavailable</text>',
            f'  <text x="42" y="162" fill="#b8c0d4" font-family="{FONT}" font-size="15">{safe}</text>',
            "</svg>",
        ]
    )
