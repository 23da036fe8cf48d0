"""Free-text stage/platform classification into visual tones.

The vocabularies are kept as ordered rule tables: the first rule whose
keyword appears (case-insensitively) in the text wins. Bump
``TONE_RULES_VERSION`` whenever a table changes so exported images can be
traced back to the vocabulary that produced them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence, Tuple

StageTone = Literal["running", "winner", "ended", "neutral"]
PlatformTone = Literal["ios", "android", "backend", "other"]

TONE_RULES_VERSION = 1


@dataclass(frozen=True)
class ToneRule:
    tone: str
    keywords: Tuple[str, ...]

    def matches(self, lowered: str) -> bool:
        return any(keyword in lowered for keyword in self.keywords)


STAGE_TONE_RULES: Tuple[ToneRule, ...] = (
    ToneRule("running", ("running", "active", "exploring")),
    ToneRule("winner", ("winner", "rollout", "shipped")),
    ToneRule("ended", ("ended", "stop", "backlog")),
)

PLATFORM_TONE_RULES: Tuple[ToneRule, ...] = (
    ToneRule("ios", ("ios",)),
    ToneRule("android", ("android",)),
    ToneRule("backend", ("backend", "server")),
)


def classify(text: str, rules: Sequence[ToneRule], default: str) -> str:
    lowered = (text or "").lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule.tone
    return default


def stage_tone(stage: str) -> StageTone:
    return classify(stage, STAGE_TONE_RULES, "neutral")  # type: ignore[return-value]


def platform_tone(platform: str) -> PlatformTone:
    return classify(platform, PLATFORM_TONE_RULES, "other")  # type: ignore[return-value]
