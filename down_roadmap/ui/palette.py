"""톤별 색상 관리 모듈.

실험 단계 톤과 릴리스 플랫폼 톤에 대응하는 색상 테이블을 제공합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class TonePalette:
    fill: str
    stroke: str
    text: str


STAGE_PALETTES: Dict[str, TonePalette] = {
    "running": TonePalette("rgba(69, 167, 100, 0.36)", "rgba(87, 188, 117, 0.55)", "#ebf9ee"),
    "winner": TonePalette("rgba(51, 130, 224, 0.36)", "rgba(72, 153, 245, 0.55)", "#e8f2fe"),
    "ended": TonePalette("rgba(114, 118, 129, 0.36)", "rgba(152, 158, 174, 0.44)", "#f0f1f5"),
    "neutral": TonePalette("rgba(181, 143, 58, 0.36)", "rgba(201, 166, 88, 0.55)", "#fbf5e8"),
}

PLATFORM_COLORS: Dict[str, str] = {
    "ios": "#3d7ce0",
    "android": "#2d9f66",
    "backend": "#8d70cf",
    "other": "#6c7484",
}

# 공통 배경/텍스트 색상
BACKGROUND = "#11141b"
HEADER_GRADIENT = ("#0b0e13", "#0e1218")
MONTH_TEXT = "#f3f4f8"
DAY_TEXT = "#a0a7b7"
WEEKEND_DAY_TEXT = "#7c8392"
BAND_LABEL_TEXT = "#8d93a3"
SUMMARY_TEXT = "#8a8f9e"
RELEASE_TEXT = "#dae0ec"
TODAY_LINE = "#ff6464"


def stage_palette(tone: str) -> TonePalette:
    return STAGE_PALETTES.get(tone, STAGE_PALETTES["neutral"])


def platform_color(tone: str) -> str:
    return PLATFORM_COLORS.get(tone, PLATFORM_COLORS["other"])
