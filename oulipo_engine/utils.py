"""
Text helpers shared by the constraint, validator and generator modules.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Dict, Iterator, List, Tuple

VOWELS = "aeiou"

_WORD_RE = re.compile(r"\S+")
_SENTENCE_END_RE = re.compile(r"(?<=[.!?])\s+")


def is_vowel(ch: str) -> bool:
    """Check if a character is one of a, e, i, o, u (any case)."""
    return len(ch) == 1 and ch.lower() in VOWELS


def word_count(text: str) -> int:
    return len(text.split())


def iter_words(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (offset, word) for every whitespace-delimited word in text."""
    for match in _WORD_RE.finditer(text):
        yield match.start(), match.group()


def split_sentences(text: str) -> List[str]:
    """Split on whitespace following '.', '!' or '?'. Empty pieces are dropped."""
    return [piece.strip() for piece in _SENTENCE_END_RE.split(text) if piece.strip()]


def is_palindrome(text: str) -> bool:
    """True if the alphanumeric characters read the same both ways, ignoring case."""
    cleaned = [ch.lower() for ch in text if ch.isalnum()]
    return cleaned == cleaned[::-1]


def letter_frequency(text: str) -> Dict[str, int]:
    """Frequency of lowercased alphabetic characters only."""
    return dict(Counter(ch.lower() for ch in text if ch.isalpha()))
