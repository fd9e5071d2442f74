"""Lipogram: text must avoid one letter entirely."""

from __future__ import annotations

import logging
from typing import List

from ..errors import InvalidConfigError
from ..schemas.results import ConstraintResult, Violation
from .base import Constraint

logger = logging.getLogger(__name__)


def check(text: str, forbidden_letter: str) -> ConstraintResult:
    """Flag every occurrence of forbidden_letter, compared case-insensitively."""
    forbidden = forbidden_letter.lower()
    violations = [
        Violation(
            position=pos,
            length=1,
            issue=f"Forbidden letter '{forbidden_letter}' found",
            suggestion="Replace with alternative word",
        )
        for pos, ch in enumerate(text)
        if ch.lower() == forbidden
    ]
    logger.debug(
        "lipogram check on %d chars: %d violations", len(text), len(violations)
    )

    metadata = {
        "forbidden_letter": forbidden_letter,
        "violation_count": len(violations),
        "text_length": len(text),
    }
    if not violations:
        return ConstraintResult.passed("Valid lipogram", ["Perfect lipogram!"], metadata)
    return ConstraintResult.failed(
        "Violations found", violations, _suggestions(forbidden), metadata
    )


def _suggestions(forbidden_letter: str) -> List[str]:
    return [
        f"Avoid words containing '{forbidden_letter}'",
        "Use synonyms without the forbidden letter",
        "Restructure sentences to eliminate problematic words",
        "Consider alternative phrasings",
    ]


class LipogramConstraint(Constraint):
    """Text must not contain the forbidden letter."""

    name = "lipogram"
    description = "Text must avoid a specific letter entirely"

    def __init__(self, forbidden_letter: str):
        if len(forbidden_letter) != 1 or not forbidden_letter.isalpha():
            raise InvalidConfigError(
                f"'{forbidden_letter}' is not a single letter"
            )
        self.forbidden_letter = forbidden_letter

    def check(self, text: str) -> ConstraintResult:
        return check(text, self.forbidden_letter)

    def get_config(self) -> dict:
        return {"forbidden_letter": self.forbidden_letter}
