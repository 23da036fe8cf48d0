"""SVG 내보내기 크기 변형(variant) 설정.

변형은 SVG의 글자 크기에만 영향을 주며 레이아웃 좌표는 바꾸지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .formatters import round_half_up


@dataclass(frozen=True)
class VariantSettings:
    id: str
    font_scale: float
    filename_tag: str


DEFAULT_VARIANT = VariantSettings(id="default", font_scale=1.0, filename_tag="")
SMALL_VARIANT = VariantSettings(id="small", font_scale=0.74, filename_tag="figma-small")
TINY_VARIANT = VariantSettings(id="tiny", font_scale=0.6, filename_tag="figma-tiny")

VARIANTS: Tuple[VariantSettings, ...] = (DEFAULT_VARIANT, SMALL_VARIANT, TINY_VARIANT)

_ALIASES: Dict[str, VariantSettings] = {
    "default": DEFAULT_VARIANT,
    "small": SMALL_VARIANT,
    "figma": SMALL_VARIANT,
    "figma-small": SMALL_VARIANT,
    "tiny": TINY_VARIANT,
    "figma-xs": TINY_VARIANT,
    "figma-tiny": TINY_VARIANT,
}

# 텍스트 요소별 (기본 크기, 최소 크기)
FONT_SIZES: Dict[str, Tuple[float, float]] = {
    "month": (19, 9),
    "day": (18, 8),
    "band": (12, 6),
    "experiment": (15, 7),
    "release": (12, 6),
    "summary": (12, 6),
}


def resolve_variant(raw: Optional[str]) -> VariantSettings:
    """변형 이름(별칭 포함)을 설정으로 변환합니다. 알 수 없는 값은 default."""
    value = (raw or "default").strip().lower()
    return _ALIASES.get(value, DEFAULT_VARIANT)


def scale_font(base: float, variant: VariantSettings, minimum: float = 1) -> float:
    """배율을 적용한 글자 크기 (소수 둘째 자리 반올림, 최소값 보장)."""
    return max(minimum, round_half_up(base * variant.font_scale, 2))


def font_size(element: str, variant: VariantSettings) -> float:
    base, minimum = FONT_SIZES[element]
    return scale_font(base, variant, minimum)
