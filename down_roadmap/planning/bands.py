"""Vertical band offsets derived from a timeline layout."""

from __future__ import annotations

from ..core.config import (
    BODY_BOTTOM_PADDING,
    EXPERIMENT_BAND_PADDING,
    EXPERIMENT_BAND_TOP,
    EXPERIMENT_ROW_HEIGHT,
    RELEASE_BAND_EXTRA_HEIGHT,
    RELEASE_BAND_GAP,
    RELEASE_LANE_HEIGHT,
)
from ..domain.models import BandLayout, TimelineLayout


def band_layout(timeline: TimelineLayout) -> BandLayout:
    """Experiments band on top, releases band below, then bottom padding."""

    experiment_band_height = timeline.experiment_rows * EXPERIMENT_ROW_HEIGHT + EXPERIMENT_BAND_PADDING
    release_band_top = EXPERIMENT_BAND_TOP + experiment_band_height + RELEASE_BAND_GAP
    release_band_height = timeline.release_lanes * RELEASE_LANE_HEIGHT + RELEASE_BAND_EXTRA_HEIGHT

    return BandLayout(
        experiment_band_top=EXPERIMENT_BAND_TOP,
        experiment_band_height=experiment_band_height,
        release_band_top=release_band_top,
        release_band_height=release_band_height,
        body_height=release_band_top + release_band_height + BODY_BOTTOM_PADDING,
    )
