"""
SVG 내보내기 테스트

샘플 데이터 (conftest.sample_data):
- 실험 A: 2024-01-03 ~ 2024-01-10 (row 0)
- 실험 B: 2024-01-05 ~ 2024-01-08 (row 1)
- 릴리스: 2024-01-01 Backend
"""
from __future__ import annotations

import pandas as pd
import pytest

from down_roadmap.domain.exceptions import LayoutError
from down_roadmap.domain.models import RoadmapData
from down_roadmap.planning.layout import layout_timeline
from down_roadmap.ui.svg_export import (
    build_error_svg,
    build_timeline_svg,
    experiment_label,
    export_filename,
    summary_text,
)
from down_roadmap.ui.variants import DEFAULT_VARIANT, SMALL_VARIANT, TINY_VARIANT


@pytest.fixture
def timeline(sample_data, now):
    return layout_timeline(
        sample_data.experiments, sample_data.releases, sample_data.window_start, now=now
    )


def test_svg_document_size(sample_data, timeline, now):
    """폭은 캔버스 폭, 높이는 헤더 + 본문"""
    svg = build_timeline_svg(sample_data, timeline, now=now)

    assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<svg ')
    assert 'width="340" height="328" viewBox="0 0 340 328"' in svg
    assert svg.rstrip().endswith("</svg>")


def test_svg_experiment_bar_position(sample_data, timeline, now):
    """막대 좌표는 헤더 높이만큼 아래로 이동"""
    svg = build_timeline_svg(sample_data, timeline, now=now)

    assert '<rect x="70" y="92" width="268" height="30"' in svg
    assert '<rect x="138" y="132" width="132" height="30"' in svg


def test_svg_escapes_text_and_links(sample_data, timeline, now):
    svg = build_timeline_svg(sample_data, timeline, now=now)

    assert "Checkout A &amp; B · Running" in svg
    assert "Checkout A & B" not in svg
    assert 'href="https://www.notion.so/Checkout-A-&amp;-B"' in svg


def test_svg_release_label_and_today_line(sample_data, timeline, now):
    svg = build_timeline_svg(sample_data, timeline, now=now)

    assert "Growth BE 2.3.1 Backend" in svg
    assert '<circle cx="17" cy="231"' in svg
    assert '<line x1="153" y1="74" x2="153" y2="328"' in svg


def test_svg_without_today_line_outside_window(sample_data, timeline):
    svg = build_timeline_svg(sample_data, timeline, now=pd.Timestamp("2024-02-01"))

    assert 'x1="153" y1="74"' not in svg


def test_svg_summary(sample_data, timeline, now):
    svg = build_timeline_svg(sample_data, timeline, now=now)

    assert summary_text(sample_data, timeline) == (
        "2 experiments • 1 releases • Jan 1, 2024 - Jan 10, 2024"
    )
    assert "2 experiments • 1 releases • Jan 1, 2024 - Jan 10, 2024" in svg


def test_svg_has_no_blank_lines(sample_data, timeline, now):
    svg = build_timeline_svg(sample_data, timeline, now=pd.Timestamp("2025-01-01"))

    assert all(line for line in svg.split("\n"))


def test_variant_changes_fonts_only(sample_data, timeline, now):
    """변형은 글자 크기만 바꾸고 좌표는 유지"""
    default_svg = build_timeline_svg(sample_data, timeline, DEFAULT_VARIANT, now=now)
    small_svg = build_timeline_svg(sample_data, timeline, SMALL_VARIANT, now=now)

    assert 'font-size="19"' in default_svg
    assert 'font-size="14.06"' in small_svg
    for svg in (default_svg, small_svg):
        assert '<rect x="70" y="92" width="268" height="30"' in svg
        assert 'width="340" height="328"' in svg


def test_small_variant_release_label_height(sample_data, timeline, now):
    """default는 20px, 나머지는 배율 적용 후 최소 14px"""
    assert 'height="20" rx="10"' in build_timeline_svg(sample_data, timeline, now=now)
    assert 'height="15" rx="10"' in build_timeline_svg(sample_data, timeline, SMALL_VARIANT, now=now)
    assert 'height="14" rx="10"' in build_timeline_svg(sample_data, timeline, TINY_VARIANT, now=now)


def test_layout_mismatch_raises(sample_data, timeline, now):
    trimmed = RoadmapData(
        experiments=sample_data.experiments[:1],
        releases=sample_data.releases,
        window_start=sample_data.window_start,
        window_end=sample_data.window_end,
    )

    with pytest.raises(LayoutError):
        build_timeline_svg(trimmed, timeline, now=now)


def test_empty_roadmap_svg(now):
    data = RoadmapData(experiments=(), releases=(), window_start="2024-01-01", window_end="2024-01-05")
    timeline = layout_timeline((), (), data.window_start, now=now)

    svg = build_timeline_svg(data, timeline, now=now)

    assert "0 experiments • 0 releases • Jan 1, 2024 - Jan 5, 2024" in svg
    assert "EXPERIMENTS" in svg and "RELEASES" in svg


def test_experiment_label():
    assert experiment_label("Paywall", "Running") == "Paywall · Running"
    assert experiment_label("Paywall", "") == "Paywall"


@pytest.mark.parametrize(
    "variant,expected",
    [
        (DEFAULT_VARIANT, "down-roadmap-2024-01-05.svg"),
        (SMALL_VARIANT, "down-roadmap-figma-small-2024-01-05.svg"),
        (TINY_VARIANT, "down-roadmap-figma-tiny-2024-01-05.svg"),
    ],
)
def test_export_filename(variant, expected, now):
    assert export_filename(variant, now) == expected


def test_error_svg_escapes_message():
    svg = build_error_svg("Missing required env var: <NOTION_DATASOURCE_RELEASES>")

    assert 'width="1200" height="260"' in svg
    assert "SVG export unavailable" in svg
    assert "&lt;NOTION_DATASOURCE_RELEASES&gt;" in svg
