"""Planning layer exports: layout engine, band layout, tones and geometry."""

from .bands import band_layout
from .geometry import (
    BarGeometry,
    day_center_x,
    experiment_bar,
    month_markers,
    release_anchor_x,
    release_marker_top,
    today_index,
    window_days,
)
from .layout import (
    assign_experiment_rows,
    assign_release_lanes,
    layout_timeline,
    release_label_width,
)
from .tones import (
    PLATFORM_TONE_RULES,
    STAGE_TONE_RULES,
    TONE_RULES_VERSION,
    PlatformTone,
    StageTone,
    ToneRule,
    classify,
    platform_tone,
    stage_tone,
)

__all__ = [
    "layout_timeline",
    "assign_experiment_rows",
    "assign_release_lanes",
    "release_label_width",
    "band_layout",
    "BarGeometry",
    "day_center_x",
    "experiment_bar",
    "release_anchor_x",
    "release_marker_top",
    "today_index",
    "window_days",
    "month_markers",
    "StageTone",
    "PlatformTone",
    "ToneRule",
    "TONE_RULES_VERSION",
    "STAGE_TONE_RULES",
    "PLATFORM_TONE_RULES",
    "classify",
    "stage_tone",
    "platform_tone",
]
