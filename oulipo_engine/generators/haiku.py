"""Themed 5-7-5 haiku from a fixed template bank."""

from __future__ import annotations

from typing import Dict

from ..constraints.base import Generator
from ..schemas.results import ConstraintResult

DEFAULT_HAIKU = (
    "Words flow like water\nConstraints shape creative thought\nBeauty finds its way"
)

HAIKU_BY_THEME: Dict[str, str] = {
    "nature": "Cherry blossoms fall\nSilent pond reflects the moon\nSpring wind carries peace",
    "seasons": "Autumn leaves spiral\nGolden carpet on the path\nTime's gentle passage",
    "love": "Two hearts beat as one\nIn the quiet of twilight\nLove needs no words",
    "time": "Clock hands circle round\nMoments slip like grains of sand\nNow is all we have",
}


def generate(theme: str) -> ConstraintResult:
    haiku = HAIKU_BY_THEME.get(theme.strip().lower(), DEFAULT_HAIKU)
    return ConstraintResult.passed(
        haiku,
        [
            "Traditional haiku captures a moment in nature",
            "Focus on sensory imagery",
            "Include a seasonal reference (kigo)",
            "Create a pause or break (kireji)",
        ],
        {
            "theme": theme,
            "syllable_pattern": "5-7-5",
            "lines": len(haiku.splitlines()),
            "traditional_elements": ["kigo", "kireji", "present_tense"],
        },
    )


class HaikuGenerator(Generator):
    name = "haiku"
    description = "Three-line 5-7-5 poem on a theme"

    def generate(self, prompt: str) -> ConstraintResult:
        return generate(prompt)
