"""Prisoner's constraint: only letters drawn without loops are permitted."""

from __future__ import annotations

import logging

from ..schemas.results import ConstraintResult, Violation
from .base import Constraint

logger = logging.getLogger(__name__)

ALLOWED_LETTERS = "cfhijklmnstuvwxyz"
FORBIDDEN_LETTERS = "abdegopqr"


def check(text: str) -> ConstraintResult:
    violations = [
        Violation(
            position=pos,
            length=1,
            issue=f"Letter '{ch}' contains loops and is forbidden",
            suggestion="Replace with a letter without loops",
        )
        for pos, ch in enumerate(text)
        if ch.isalpha() and ch.lower() not in ALLOWED_LETTERS
    ]
    logger.debug("prisoners check on %d chars: %d violations", len(text), len(violations))

    metadata = {
        "allowed_letters": ALLOWED_LETTERS,
        "forbidden_letters": FORBIDDEN_LETTERS,
        "violation_count": len(violations),
        "text_length": len(text),
    }
    if not violations:
        return ConstraintResult.passed(
            "Valid prisoner's constraint text",
            ["Perfect prisoner's constraint text!"],
            metadata,
        )
    return ConstraintResult.failed(
        f"{len(violations)} forbidden letters found",
        violations,
        [
            "Use only letters without loops: " + ", ".join(ALLOWED_LETTERS),
            "Avoid letters: " + ", ".join(FORBIDDEN_LETTERS),
            "Focus on words with straight lines and simple curves",
            "Think of letters that could be drawn with sticks",
        ],
        metadata,
    )


class PrisonersConstraint(Constraint):
    """Only loop-free letters are allowed."""

    name = "prisoners"
    description = "Text may only use letters without loops: " + ALLOWED_LETTERS

    def check(self, text: str) -> ConstraintResult:
        return check(text)
