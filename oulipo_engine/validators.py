"""
General text validators: length, word count and character frequency.

Bounds are inclusive on the satisfying side. Lengths are counted in code
points. Whole-text problems use position 0 and the text length as the span.
"""

from __future__ import annotations

from typing import List, Optional

from .constraints.base import Constraint
from .errors import InvalidConfigError
from .schemas.results import ConstraintResult, ValidationConfig, Violation
from .utils import word_count


def validate_text_length(
    text: str, min_length: int = 0, max_length: Optional[int] = None
) -> ConstraintResult:
    text_length = len(text)
    violations = []

    if text_length < min_length:
        violations.append(
            Violation(
                position=0,
                length=text_length,
                issue=f"Text too short: {text_length} characters (minimum {min_length})",
                suggestion=f"Add {min_length - text_length} more characters",
            )
        )
    if max_length is not None and text_length > max_length:
        violations.append(
            Violation(
                position=max_length,
                length=text_length - max_length,
                issue=f"Text too long: {text_length} characters (maximum {max_length})",
                suggestion=f"Remove {text_length - max_length} characters",
            )
        )

    metadata = {
        "constraint_type": "length_validation",
        "current_length": text_length,
        "min_length": min_length,
        "max_length": max_length,
    }
    summary = f"Text length: {text_length} characters"
    if not violations:
        return ConstraintResult.passed(summary, ["Text length is within bounds"], metadata)
    return ConstraintResult.failed(
        summary, violations, ["Adjust text length to meet requirements"], metadata
    )


def validate_word_count(
    text: str, min_words: int = 0, max_words: Optional[int] = None
) -> ConstraintResult:
    count = word_count(text)
    violations = []

    if count < min_words:
        violations.append(
            Violation(
                position=0,
                length=len(text),
                issue=f"Too few words: {count} (minimum {min_words})",
                suggestion=f"Add {min_words - count} more words",
            )
        )
    if max_words is not None and count > max_words:
        violations.append(
            Violation(
                position=0,
                length=len(text),
                issue=f"Too many words: {count} (maximum {max_words})",
                suggestion=f"Remove {count - max_words} words",
            )
        )

    metadata = {
        "constraint_type": "word_count_validation",
        "current_words": count,
        "min_words": min_words,
        "max_words": max_words,
    }
    summary = f"Word count: {count}"
    if not violations:
        return ConstraintResult.passed(summary, ["Word count is within bounds"], metadata)
    return ConstraintResult.failed(
        summary, violations, ["Adjust word count to meet requirements"], metadata
    )


def check_character_frequency(
    text: str, target_char: str, max_frequency: int
) -> ConstraintResult:
    """Count target_char case-insensitively and fail above max_frequency."""
    target = target_char.lower()
    frequency = sum(1 for ch in text if ch.lower() == target)

    violations = []
    if frequency > max_frequency:
        violations.append(
            Violation(
                position=0,
                length=len(text),
                issue=(
                    f"Character '{target_char}' appears {frequency} times "
                    f"(maximum {max_frequency})"
                ),
                suggestion=(
                    f"Remove {frequency - max_frequency} occurrences of '{target_char}'"
                ),
            )
        )

    metadata = {
        "constraint_type": "character_frequency",
        "target_character": target_char,
        "frequency": frequency,
        "max_frequency": max_frequency,
    }
    summary = f"Character '{target_char}' appears {frequency} times"
    if not violations:
        return ConstraintResult.passed(
            summary,
            [f"Character frequency for '{target_char}' is within limits"],
            metadata,
        )
    return ConstraintResult.failed(
        summary, violations, [f"Reduce usage of character '{target_char}'"], metadata
    )


def validate_with_config(text: str, config: ValidationConfig) -> List[ConstraintResult]:
    """Run the length check, then the word check, for whichever bounds are set."""
    results = []
    if config.has_length_bounds:
        results.append(
            validate_text_length(text, config.min_length or 0, config.max_length)
        )
    if config.has_word_bounds:
        results.append(
            validate_word_count(text, config.min_words or 0, config.max_words)
        )
    return results


def _check_bounds(low: int, high: Optional[int], what: str) -> None:
    if low < 0 or (high is not None and high < 0):
        raise InvalidConfigError(f"{what} bounds must be non-negative")
    if high is not None and high < low:
        raise InvalidConfigError(f"{what} maximum {high} is below minimum {low}")


class TextLengthConstraint(Constraint):
    """Character count must fall within inclusive bounds."""

    name = "text_length"
    description = "Text length in characters must fall within the given bounds"

    def __init__(self, min_length: int = 0, max_length: Optional[int] = None):
        _check_bounds(min_length, max_length, "Length")
        self.min_length = min_length
        self.max_length = max_length

    def check(self, text: str) -> ConstraintResult:
        return validate_text_length(text, self.min_length, self.max_length)

    def get_config(self) -> dict:
        return {"min_length": self.min_length, "max_length": self.max_length}


class WordCountConstraint(Constraint):
    """Word count must fall within inclusive bounds."""

    name = "word_count"
    description = "Number of words must fall within the given bounds"

    def __init__(self, min_words: int = 0, max_words: Optional[int] = None):
        _check_bounds(min_words, max_words, "Word")
        self.min_words = min_words
        self.max_words = max_words

    def check(self, text: str) -> ConstraintResult:
        return validate_word_count(text, self.min_words, self.max_words)

    def get_config(self) -> dict:
        return {"min_words": self.min_words, "max_words": self.max_words}


class CharacterFrequencyConstraint(Constraint):
    """A character may appear at most max_frequency times."""

    name = "character_frequency"
    description = "A given character may appear at most a fixed number of times"

    def __init__(self, target_char: str, max_frequency: int):
        if len(target_char) != 1:
            raise InvalidConfigError(f"'{target_char}' is not a single character")
        if max_frequency < 0:
            raise InvalidConfigError("max_frequency must be non-negative")
        self.target_char = target_char
        self.max_frequency = max_frequency

    def check(self, text: str) -> ConstraintResult:
        return check_character_frequency(text, self.target_char, self.max_frequency)

    def get_config(self) -> dict:
        return {"target_char": self.target_char, "max_frequency": self.max_frequency}
