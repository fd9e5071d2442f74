"""Univocalic: every vowel in the text is the same vowel."""

from __future__ import annotations

import logging
from typing import Dict, List

from ..errors import InvalidConfigError
from ..schemas.results import ConstraintResult, Violation
from ..utils import VOWELS, is_vowel
from .base import Constraint

logger = logging.getLogger(__name__)

_VOWEL_SUGGESTIONS: Dict[str, List[str]] = {
    "a": [
        "Use words like: at, and, has, that, man, can",
        "A constraint that can make grand narratives",
    ],
    "e": [
        "Use words like: the, when, then, these, never",
        "Create sentences where every letter helps",
    ],
    "i": [
        "Use words like: in, is, it, this, with, kind",
        "Think minimal - it is tricky writing",
    ],
    "o": [
        "Use words like: on, do, go, of, from, long",
        "Conform to strong word contortions",
    ],
    "u": [
        "Use words like: up, but, just, much, run",
        "Construct full turns - unusually fun",
    ],
}


def check(text: str, allowed_vowel: str) -> ConstraintResult:
    """Flag every vowel that is not allowed_vowel (case-insensitive).

    The vowel is not validated here; build a UnivocalicConstraint to get
    configuration checking.
    """
    allowed = allowed_vowel.lower()
    violations = [
        Violation(
            position=pos,
            length=1,
            issue=f"Vowel '{ch}' is not allowed (only '{allowed_vowel}' permitted)",
            suggestion=f"Replace with word containing only '{allowed_vowel}'",
        )
        for pos, ch in enumerate(text)
        if is_vowel(ch) and ch.lower() != allowed
    ]
    logger.debug("univocalic check on %d chars: %d violations", len(text), len(violations))

    metadata = {
        "allowed_vowel": allowed_vowel,
        "forbidden_vowels": VOWELS.replace(allowed, ""),
        "violation_count": len(violations),
        "text_length": len(text),
    }
    if not violations:
        return ConstraintResult.passed(
            f"Valid univocalic using '{allowed_vowel}'",
            [f"Perfect univocalic using '{allowed_vowel}'!"],
            metadata,
        )
    suggestions = _VOWEL_SUGGESTIONS.get(
        allowed,
        [
            f"Focus on words containing only '{allowed_vowel}'",
            "Use a dictionary to find suitable words",
        ],
    )
    return ConstraintResult.failed(
        f"{len(violations)} forbidden vowels found",
        violations,
        list(suggestions),
        metadata,
    )


class UnivocalicConstraint(Constraint):
    """Text must use only one vowel throughout."""

    name = "univocalic"
    description = "Text must use only one vowel throughout"

    def __init__(self, allowed_vowel: str):
        if not is_vowel(allowed_vowel):
            raise InvalidConfigError(f"'{allowed_vowel}' is not a valid vowel")
        self.allowed_vowel = allowed_vowel

    def check(self, text: str) -> ConstraintResult:
        return check(text, self.allowed_vowel)

    def get_config(self) -> dict:
        return {"allowed_vowel": self.allowed_vowel}
