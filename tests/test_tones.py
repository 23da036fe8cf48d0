"""
단계/플랫폼 톤 분류 테스트
"""
from __future__ import annotations

import pytest

from down_roadmap.planning.tones import (
    STAGE_TONE_RULES,
    ToneRule,
    classify,
    platform_tone,
    stage_tone,
)


@pytest.mark.parametrize(
    "stage,expected",
    [
        ("Running", "running"),
        ("Active - week 2", "running"),
        ("exploring", "running"),
        ("Winner", "winner"),
        ("Rollout 50%", "winner"),
        ("Shipped", "winner"),
        ("Ended", "ended"),
        ("Stopped", "ended"),
        ("Backlog", "ended"),
        ("Draft", "neutral"),
        ("", "neutral"),
    ],
)
def test_stage_tone(stage, expected):
    """키워드 포함 여부로 대소문자 구분 없이 분류"""
    assert stage_tone(stage) == expected


def test_stage_tone_first_rule_wins():
    """여러 키워드가 있으면 앞선 규칙 우선 ('Winner - Ended'는 winner)"""
    assert stage_tone("Winner - Ended") == "winner"
    assert stage_tone("Running then Ended") == "running"


@pytest.mark.parametrize(
    "platform,expected",
    [
        ("iOS", "ios"),
        ("IOS app", "ios"),
        ("Android", "android"),
        ("Backend", "backend"),
        ("API Server", "backend"),
        ("Web", "other"),
        ("", "other"),
    ],
)
def test_platform_tone(platform, expected):
    assert platform_tone(platform) == expected


def test_stage_tone_handles_none():
    """None 입력은 기본 톤"""
    assert stage_tone(None) == "neutral"  # type: ignore[arg-type]


def test_classify_with_custom_rules():
    """규칙 테이블을 바꿔 끼울 수 있음"""
    rules = (ToneRule("paused", ("hold",)), *STAGE_TONE_RULES)

    assert classify("On hold", rules, "neutral") == "paused"
    assert classify("Running", rules, "neutral") == "running"
    assert classify("Unknown", rules, "fallback") == "fallback"
