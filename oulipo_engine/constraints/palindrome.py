"""Palindrome: the alphanumeric content reads the same in both directions."""

from __future__ import annotations

import logging
from typing import List, Tuple

from ..schemas.results import ConstraintResult, Violation
from ..utils import is_palindrome as _reads_both_ways, split_sentences
from .base import Constraint

logger = logging.getLogger(__name__)


def _normalize(text: str) -> List[Tuple[int, str]]:
    """Keep (original offset, lowercased char) for every alphanumeric char."""
    return [(pos, ch.lower()) for pos, ch in enumerate(text) if ch.isalnum()]


def check(text: str) -> ConstraintResult:
    """Check whether text is a palindrome, ignoring case and punctuation.

    One violation is emitted per mismatched mirror pair. Its position is the
    offset of the front character in the original text, not in the cleaned
    text, so editors can highlight it directly.
    """
    cleaned = _normalize(text)
    cleaned_text = "".join(ch for _, ch in cleaned)
    is_palindrome = _reads_both_ways(cleaned_text)

    violations: List[Violation] = []
    if not is_palindrome:
        count = len(cleaned)
        for i in range(count // 2):
            front_pos, front = cleaned[i]
            back_pos, back = cleaned[count - 1 - i]
            if front != back:
                violations.append(
                    Violation(
                        position=front_pos,
                        length=1,
                        issue=(
                            f"Character '{text[front_pos]}' doesn't match its mirror "
                            f"'{text[back_pos]}' at position {back_pos}"
                        ),
                        suggestion=f"Consider changing to '{back}'",
                    )
                )
    logger.debug("palindrome check: %d mismatched pairs", len(violations))

    metadata = {
        "original_length": len(text),
        "cleaned_length": len(cleaned_text),
        "is_palindrome": is_palindrome,
        "cleaned_text": cleaned_text,
        "palindromic_sentences": [s for s in split_sentences(text) if _reads_both_ways(s)],
    }
    if is_palindrome:
        return ConstraintResult.passed("Valid palindrome", ["Perfect palindrome!"], metadata)
    return ConstraintResult.failed(
        "Not a palindrome",
        violations,
        [
            "Add mirroring words at the end",
            "Remove or modify middle words",
            "Try single-word palindromes first",
            "Consider phrase-level palindromes",
        ],
        metadata,
    )


class PalindromeConstraint(Constraint):
    """Text must read the same forwards and backwards."""

    name = "palindrome"
    description = "Text must read the same forwards and backwards"

    def check(self, text: str) -> ConstraintResult:
        return check(text)
