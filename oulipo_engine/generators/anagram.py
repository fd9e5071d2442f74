"""Anagram generation and anagram checking."""

from __future__ import annotations

from typing import List

from ..constraints.base import Generator
from ..schemas.results import ConstraintResult, Violation
from ..utils import letter_frequency

MAX_ROTATIONS = 5


def _letters(text: str) -> str:
    return "".join(ch for ch in text if ch.isalpha()).lower()


def _simple_anagrams(letters: str) -> List[str]:
    """Letter rotations followed by the reversal, skipping the input itself."""
    anagrams: List[str] = []
    for shift in range(1, min(MAX_ROTATIONS, len(letters)) + 1):
        candidate = letters[shift:] + letters[:shift]
        if candidate != letters and candidate not in anagrams:
            anagrams.append(candidate)
    reversed_letters = letters[::-1]
    if reversed_letters != letters and reversed_letters not in anagrams:
        anagrams.append(reversed_letters)
    return anagrams


def generate_anagrams(text: str) -> ConstraintResult:
    letters = _letters(text)
    if not letters:
        return ConstraintResult.failed(
            None,
            [
                Violation(
                    position=0,
                    length=len(text),
                    issue="No alphabetic characters found",
                    suggestion="Enter text with letters",
                )
            ],
            ["Try entering some words with letters"],
            {
                "constraint_type": "anagram_generation",
                "original_length": len(text),
                "clean_length": 0,
            },
        )

    anagrams = _simple_anagrams(letters)
    return ConstraintResult.passed(
        ", ".join(anagrams),
        [
            "Try different letter combinations",
            "Look for meaningful words in the anagrams",
        ],
        {
            "constraint_type": "anagram_generation",
            "anagram_count": len(anagrams),
            "anagrams": anagrams,
            "original_text": text,
            "letter_frequency": letter_frequency(letters),
        },
    )


def check_anagram(text1: str, text2: str) -> ConstraintResult:
    """Two texts are anagrams if their letter frequencies match."""
    freq1 = letter_frequency(text1)
    freq2 = letter_frequency(text2)
    metadata = {
        "constraint_type": "anagram_check",
        "text1_freq": freq1,
        "text2_freq": freq2,
        "is_anagram": freq1 == freq2,
    }
    if freq1 == freq2:
        return ConstraintResult.passed("Valid anagram", ["Perfect anagram!"], metadata)
    return ConstraintResult.failed(
        "Not an anagram",
        [
            Violation(
                position=0,
                length=len(text2),
                issue="Letter frequencies don't match",
                suggestion="Rearrange letters to match the first text",
            )
        ],
        ["Check letter frequencies", "Try rearranging"],
        metadata,
    )


class AnagramGenerator(Generator):
    name = "anagram"
    description = "Rearrangements of the letters of the input"

    def generate(self, prompt: str) -> ConstraintResult:
        return generate_anagrams(prompt)
