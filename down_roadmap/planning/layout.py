"""Timeline layout engine.

Turns dated experiments and releases into row/lane assignments and pixel
extents. Both renderers consume the result, so the assignment order and
tie-breaks below are part of the output contract: rows and lanes are filled
first-fit in start/date order, never re-packed.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

import pandas as pd

from ..common.dates import day_difference, parse_calendar_date, truncate_to_day, utc_now
from ..common.text import compact_release_label
from ..core.config import (
    DAY_WIDTH,
    RELEASE_LABEL_CHAR_WIDTH,
    RELEASE_LABEL_GUTTER,
    RELEASE_LABEL_MAX_WIDTH,
    RELEASE_LABEL_MIN_WIDTH,
    RELEASE_LABEL_PADDING,
    RELEASE_LABEL_TRAILING_SPACE,
)
from ..domain.models import (
    ExperimentRecord,
    PositionedExperiment,
    PositionedRelease,
    ReleaseRecord,
    TimelineLayout,
)
from .geometry import release_anchor_x

logger = logging.getLogger(__name__)


def release_label_width(name: str) -> int:
    """Estimated pixel width of a release label, clamped to [92, 240]."""

    label = compact_release_label(name)
    estimate = len(label) * RELEASE_LABEL_CHAR_WIDTH + RELEASE_LABEL_PADDING
    return max(RELEASE_LABEL_MIN_WIDTH, min(RELEASE_LABEL_MAX_WIDTH, estimate))


def _window_end(
    today: pd.Timestamp,
    experiments: Sequence[ExperimentRecord],
    releases: Sequence[ReleaseRecord],
) -> pd.Timestamp:
    candidates = [parse_calendar_date(exp.end_date) for exp in experiments]
    candidates += [parse_calendar_date(rel.date) for rel in releases]
    return max([today, *candidates])


def assign_experiment_rows(
    experiments: Sequence[ExperimentRecord], start_date: pd.Timestamp
) -> List[PositionedExperiment]:
    """
    Place experiments on rows with a first-fit greedy scan.

    A row is reusable only when its last bar ended strictly before the new
    bar starts; bars touching on the same day go to different rows.
    """
    row_ends: List[int] = []
    positioned: List[PositionedExperiment] = []

    for item in sorted(experiments, key=lambda exp: exp.start_date):
        start_index = max(0, day_difference(start_date, parse_calendar_date(item.start_date)))
        # inverted ranges collapse to a single day
        end_index = max(start_index, day_difference(start_date, parse_calendar_date(item.end_date)))

        row = next((idx for idx, row_end in enumerate(row_ends) if start_index > row_end), None)
        if row is None:
            row = len(row_ends)
            row_ends.append(end_index)
        else:
            row_ends[row] = end_index

        positioned.append(
            PositionedExperiment.from_record(
                item, row=row, start_index=start_index, end_index=end_index
            )
        )

    return positioned


def assign_release_lanes(
    releases: Sequence[ReleaseRecord], start_date: pd.Timestamp
) -> List[PositionedRelease]:
    """
    Place release markers on lanes with a first-fit greedy scan.

    A lane is reusable when the new anchor lies more than the gutter to the
    right of the lane's occupied extent (previous anchor plus label width).
    """
    lane_occupancy: List[int] = []
    positioned: List[PositionedRelease] = []

    for item in sorted(releases, key=lambda rel: rel.date):
        day_index = max(0, day_difference(start_date, parse_calendar_date(item.date)))
        x = release_anchor_x(day_index)
        label_end = x + release_label_width(item.name)

        lane = next(
            (
                idx
                for idx, occupied_until in enumerate(lane_occupancy)
                if x > occupied_until + RELEASE_LABEL_GUTTER
            ),
            None,
        )
        if lane is None:
            lane = len(lane_occupancy)
            lane_occupancy.append(label_end)
        else:
            lane_occupancy[lane] = label_end

        positioned.append(
            PositionedRelease.from_record(item, lane=lane, day_index=day_index, label_end=label_end)
        )

    return positioned


def layout_timeline(
    experiments: Sequence[ExperimentRecord],
    releases: Sequence[ReleaseRecord],
    window_start: Union[str, pd.Timestamp],
    *,
    now: Optional[pd.Timestamp] = None,
) -> TimelineLayout:
    """
    Compute the day window, row/lane assignments and canvas width.

    Args:
        experiments: experiment records in any order
        releases: release records in any order
        window_start: first visible day (``YYYY-MM-DD`` or Timestamp)
        now: reference instant used for "today"; defaults to the current
            UTC time and is read once per call

    Returns:
        A fresh ``TimelineLayout``. The window always extends to at least
        today and to the latest experiment end or release date.
    """
    if isinstance(window_start, str):
        start_date = parse_calendar_date(window_start)
    else:
        start_date = truncate_to_day(window_start)
    today = truncate_to_day(utc_now() if now is None else now)

    end_date = _window_end(today, experiments, releases)
    total_days = max(1, day_difference(start_date, end_date) + 1)

    positioned_experiments = assign_experiment_rows(experiments, start_date)
    positioned_releases = assign_release_lanes(releases, start_date)

    day_columns_width = total_days * DAY_WIDTH
    max_release_label_end = max(
        [rel.label_end + RELEASE_LABEL_TRAILING_SPACE for rel in positioned_releases],
        default=day_columns_width,
    )

    experiment_rows = max(1, max((exp.row + 1 for exp in positioned_experiments), default=0))
    release_lanes = max(1, max((rel.lane + 1 for rel in positioned_releases), default=0))

    layout = TimelineLayout(
        start_date=start_date,
        end_date=end_date,
        total_days=total_days,
        positioned_experiments=tuple(positioned_experiments),
        positioned_releases=tuple(positioned_releases),
        experiment_rows=experiment_rows,
        release_lanes=release_lanes,
        canvas_width=max(day_columns_width, max_release_label_end),
    )
    logger.debug(
        f"Timeline layout: {total_days} days, {experiment_rows} rows, "
        f"{release_lanes} lanes, canvas {layout.canvas_width}px"
    )
    return layout
