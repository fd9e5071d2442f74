"""Snowball: the n-th word is exactly n characters long."""

from __future__ import annotations

import logging

from ..schemas.results import ConstraintResult, Violation
from ..utils import iter_words
from .base import Constraint

logger = logging.getLogger(__name__)


def check(text: str) -> ConstraintResult:
    words = list(iter_words(text))
    violations = []

    for i, (position, word) in enumerate(words):
        expected_length = i + 1
        if len(word) != expected_length:
            violations.append(
                Violation(
                    position=position,
                    length=len(word),
                    issue=(
                        f"Word {i + 1} should be {expected_length} letters, "
                        f"but is {len(word)}"
                    ),
                    suggestion=f"Replace with a {expected_length}-letter word",
                )
            )
    logger.debug("snowball check on %d words: %d violations", len(words), len(violations))

    metadata = {
        "word_count": len(words),
        "violation_count": len(violations),
        "expected_pattern": list(range(1, len(words) + 1)),
        "actual_lengths": [len(word) for _, word in words],
    }
    if not violations:
        return ConstraintResult.passed(
            "Valid snowball pattern", ["Perfect snowball pattern!"], metadata
        )
    return ConstraintResult.failed(
        f"{len(violations)} violations found",
        violations,
        [
            "Start with single-letter words (I, a)",
            "Use progressively longer synonyms",
            "Consider compound words for longer positions",
            "Plan the sentence structure in advance",
        ],
        metadata,
    )


class SnowballConstraint(Constraint):
    """Each word must be one letter longer than the previous."""

    name = "snowball"
    description = "Each word must be exactly one letter longer than the previous"

    def check(self, text: str) -> ConstraintResult:
        return check(text)
