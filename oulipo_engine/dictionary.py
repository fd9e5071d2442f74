"""
Fixed vocabulary used by the N+7 transform.

The vocabulary is an ordered, cyclic word list. It is built once and never
mutated, so a single instance can be shared by reference across callers.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

DEFAULT_VOCABULARY: Tuple[str, ...] = (
    "the", "quick", "brown", "fox", "jumps", "over", "lazy", "dog",
    "and", "runs", "through", "forest", "with", "great", "speed",
    "while", "birds", "sing", "in", "trees", "above", "ground",
    "where", "flowers", "bloom", "during", "spring", "season",
    "creating", "beautiful", "scenes", "that", "inspire", "writers",
    "to", "craft", "poems", "using", "various", "techniques",
)


class Dictionary:
    """Ordered word list with "N positions away" lookups."""

    def __init__(self, words: Optional[Sequence[str]] = None):
        vocabulary = tuple(
            w.lower() for w in (DEFAULT_VOCABULARY if words is None else words)
        )
        if not vocabulary:
            raise ValueError("Dictionary vocabulary cannot be empty")
        self._words = vocabulary
        # First occurrence wins if the list repeats a word.
        self._index: Dict[str, int] = {}
        for i, word in enumerate(vocabulary):
            self._index.setdefault(word, i)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._index

    def contains_word(self, word: str) -> bool:
        return word in self

    def index_of(self, word: str) -> Optional[int]:
        return self._index.get(word.lower())

    def get_n_plus_word(self, word: str, offset: int) -> Optional[str]:
        """Return the word offset positions after word, wrapping around.

        Lookup is case-insensitive. Returns None if word is not in the
        vocabulary; negative offsets count backwards.
        """
        index = self.index_of(word)
        if index is None:
            return None
        return self._words[(index + offset) % len(self._words)]
