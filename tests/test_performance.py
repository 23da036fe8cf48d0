"""
성능 측정 유틸리티 테스트
"""
from __future__ import annotations

import logging

import pytest

from down_roadmap.common import performance
from down_roadmap.common.performance import measure_time, measure_time_context


def test_measure_time_returns_result(caplog):
    @measure_time
    def build():
        return "done"

    with caplog.at_level(logging.INFO, logger="down_roadmap.common.performance"):
        assert build() == "done"

    assert "build completed in" in caplog.text


def test_context_records_elapsed():
    with measure_time_context("Timeline layout") as ctx:
        pass

    assert ctx.elapsed >= 0


def test_context_logs_failure(caplog):
    with caplog.at_level(logging.ERROR, logger="down_roadmap.common.performance"):
        with pytest.raises(RuntimeError):
            with measure_time_context("Notion experiments query"):
                raise RuntimeError("boom")

    assert "Notion experiments query failed after" in caplog.text


def test_slow_operation_logs_warning(caplog, monkeypatch):
    monkeypatch.setattr(performance, "WARNING_THRESHOLD_SECONDS", 0.0)

    with caplog.at_level(logging.WARNING, logger="down_roadmap.common.performance"):
        with measure_time_context("SVG export"):
            pass

    assert "SVG export took" in caplog.text
