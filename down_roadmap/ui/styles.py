"""타임라인 뷰 스타일 모듈.

인터랙티브 타임라인과 오류 패널에 쓰이는 CSS를 제공합니다.
"""

from __future__ import annotations

import streamlit as st

from ..core.config import DAY_WIDTH, EXPERIMENT_BAR_HEIGHT, HEADER_HEIGHT

ROADMAP_CSS = f"""
:root {{
    --roadmap-bg: #11141b;
    --roadmap-header-bg: linear-gradient(180deg, #0b0e13 0%, #0e1218 100%);
    --roadmap-border: rgba(255, 255, 255, 0.12);
    --roadmap-text: #e7ebf6;
    --roadmap-muted: #8d93a3;
}}

.roadmap-summary {{
    display: flex;
    flex-wrap: wrap;
    gap: 0.5rem;
    margin: 0.25rem 0 0.75rem;
    color: var(--roadmap-muted);
    font-size: 0.85rem;
}}

.roadmap-summary span {{
    padding: 0.15rem 0.6rem;
    border-radius: 999px;
    background: rgba(49, 51, 63, 0.08);
}}

.timeline-viewport {{
    overflow-x: auto;
    border-radius: 0.75rem;
    border: 1px solid var(--roadmap-border);
    background: var(--roadmap-bg);
}}

.timeline-canvas {{
    position: relative;
    font-family: Inter, "Segoe UI", Arial, sans-serif;
    color: var(--roadmap-text);
}}

.timeline-header {{
    position: absolute;
    left: 0;
    right: 0;
    top: 0;
    height: {HEADER_HEIGHT}px;
    background: var(--roadmap-header-bg);
    border-bottom: 1px solid var(--roadmap-border);
}}

.month-row {{
    position: relative;
    height: 34px;
    border-bottom: 1px solid rgba(255, 255, 255, 0.1);
}}

.month-label {{
    position: absolute;
    top: 6px;
    font-size: 19px;
    font-weight: 640;
    color: #f3f4f8;
    white-space: nowrap;
}}

.day-row {{
    position: relative;
    height: 40px;
}}

.day-label {{
    position: absolute;
    top: 8px;
    text-align: center;
    font-size: 18px;
    color: #a0a7b7;
}}

.day-label.weekend {{
    color: #7c8392;
}}

.timeline-body {{
    position: absolute;
    left: 0;
    right: 0;
}}

.grid-layer {{
    position: absolute;
    inset: 0;
}}

.grid-column {{
    position: absolute;
    top: 0;
    bottom: 0;
    width: {DAY_WIDTH}px;
    background: rgba(255, 255, 255, 0.02);
    border-right: 1px solid rgba(255, 255, 255, 0.04);
    box-sizing: border-box;
}}

.grid-column.weekend {{
    background: rgba(255, 255, 255, 0.05);
}}

.grid-column.month-start {{
    border-left: 1px solid rgba(255, 255, 255, 0.12);
}}

.today-line {{
    position: absolute;
    top: 0;
    width: 2px;
    margin-left: -1px;
    background: #ff6464;
}}

.band-label, .release-divider {{
    position: absolute;
    left: 8px;
    font-size: 12px;
    letter-spacing: 1px;
    text-transform: uppercase;
    color: var(--roadmap-muted);
}}

.release-divider {{
    left: 0;
    right: 0;
    padding: 4px 8px 0;
    border-top: 1px solid var(--roadmap-border);
}}

.experiment-bar {{
    position: absolute;
    box-sizing: border-box;
    height: {EXPERIMENT_BAR_HEIGHT}px;
    display: flex;
    align-items: center;
    gap: 8px;
    padding: 0 10px;
    border-radius: 10px;
    border: 1px solid;
    overflow: hidden;
    white-space: nowrap;
    text-decoration: none !important;
    font-size: 15px;
    font-weight: 530;
}}

.experiment-bar.tone-running {{ background: rgba(69, 167, 100, 0.36); border-color: rgba(87, 188, 117, 0.55); color: #ebf9ee; }}
.experiment-bar.tone-winner {{ background: rgba(51, 130, 224, 0.36); border-color: rgba(72, 153, 245, 0.55); color: #e8f2fe; }}
.experiment-bar.tone-ended {{ background: rgba(114, 118, 129, 0.36); border-color: rgba(152, 158, 174, 0.44); color: #f0f1f5; }}
.experiment-bar.tone-neutral {{ background: rgba(181, 143, 58, 0.36); border-color: rgba(201, 166, 88, 0.55); color: #fbf5e8; }}

.experiment-name {{
    overflow: hidden;
    text-overflow: ellipsis;
}}

.stage-badge {{
    font-size: 11px;
    padding: 1px 6px;
    border-radius: 999px;
    background: rgba(0, 0, 0, 0.25);
}}

.release-item {{
    position: absolute;
    display: flex;
    align-items: center;
    gap: 5px;
    height: 10px;
    margin-left: -5px;
    text-decoration: none !important;
    white-space: nowrap;
}}

.release-point {{
    width: 10px;
    height: 10px;
    border-radius: 50%;
    box-sizing: border-box;
    border: 1.5px solid rgba(255, 255, 255, 0.55);
}}

.release-label {{
    display: inline-flex;
    align-items: center;
    gap: 6px;
    height: 20px;
    padding: 0 10px;
    border-radius: 10px;
    background: rgba(20, 24, 32, 0.9);
    border: 1px solid rgba(255, 255, 255, 0.16);
    color: #dae0ec;
    font-size: 12px;
}}

.platform-tag {{
    font-style: normal;
    opacity: 0.8;
}}

.platform-ios {{ background-color: #3d7ce0; }}
.platform-android {{ background-color: #2d9f66; }}
.platform-backend {{ background-color: #8d70cf; }}
.platform-other {{ background-color: #6c7484; }}
.platform-tag.platform-ios {{ background: none; color: #8fb4ef; }}
.platform-tag.platform-android {{ background: none; color: #7fcca4; }}
.platform-tag.platform-backend {{ background: none; color: #b9a6e6; }}
.platform-tag.platform-other {{ background: none; color: #a6acb8; }}

.error-card {{
    max-width: 720px;
    padding: 1.25rem 1.5rem;
    border-radius: 0.75rem;
    background: #1a1f2a;
    border: 1px solid #2c3445;
    color: #d8dcea;
}}

.error-card h1 {{
    font-size: 1.6rem;
    margin: 0 0 0.5rem;
    color: #e6e9ef;
}}

.error-card .error-title {{
    font-weight: 600;
}}

.error-card code {{
    color: #b8c0d4;
}}
"""


def inject_roadmap_styles() -> None:
    """Inject the timeline CSS (re-inject on each run)."""

    st.markdown(f"<style>{ROADMAP_CSS}</style>", unsafe_allow_html=True)
