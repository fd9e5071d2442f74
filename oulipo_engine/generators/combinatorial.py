"""Combinatorial poems: arrange a bag of words into lines by a named structure."""

from __future__ import annotations

import random
from typing import Callable, Dict, List, Optional, Sequence

from ..constraints.base import Generator
from ..schemas.results import ConstraintResult, Violation

STRUCTURES = ("random", "ascending", "chiasmus", "spiral")

MAX_LINE_CHARS = 50
MAX_LINE_WORDS = 4
WORDS_PER_LINE = 3
SPIRAL_MAX_LINES = 4


def _random(words: Sequence[str], rng: random.Random) -> str:
    shuffled = list(words)
    rng.shuffle(shuffled)
    lines = [
        " ".join(shuffled[i:i + WORDS_PER_LINE])
        for i in range(0, len(shuffled), WORDS_PER_LINE)
    ]
    return "\n".join(lines)


def _ascending(words: Sequence[str]) -> str:
    lines: List[str] = []
    current: List[str] = []
    current_length = 0
    for word in sorted(words, key=len):
        if current and (
            current_length + len(word) > MAX_LINE_CHARS or len(current) >= MAX_LINE_WORDS
        ):
            lines.append(" ".join(current))
            current = []
            current_length = 0
        current.append(word)
        current_length += len(word) + 1
    if current:
        lines.append(" ".join(current))
    return "\n".join(lines)


def _chiasmus(words: Sequence[str]) -> str:
    if len(words) < 4:
        return " ".join(words)
    mid = len(words) // 2
    return " ".join(words[:mid]) + "\n" + " ".join(reversed(words[mid:]))


def _spiral(words: Sequence[str]) -> str:
    used = [False] * len(words)
    step = max(1, len(words) // 3)
    index = 0
    lines: List[str] = []

    while len(lines) < SPIRAL_MAX_LINES and not all(used):
        line_words = []
        for _ in range(WORDS_PER_LINE):
            if not used[index]:
                line_words.append(words[index])
                used[index] = True
            index = (index + step) % len(words)
            while used[index] and not all(used):
                index = (index + 1) % len(words)
        if line_words:
            lines.append(" ".join(line_words))
    return "\n".join(lines)


def generate_combinatorial_poem(
    words: Sequence[str], structure: str = "random", rng: Optional[random.Random] = None
) -> ConstraintResult:
    """Arrange words into a poem. Unknown structures fall back to random."""
    words = [word for word in words if word]
    if not words:
        return ConstraintResult.failed(
            None,
            [
                Violation(
                    position=0,
                    length=0,
                    issue="No words provided",
                    suggestion="Provide a list of words to combine",
                )
            ],
            ["Enter at least 3-5 words"],
            {"constraint_type": "combinatorial_poem", "word_count": 0},
        )

    rng = rng or random.Random()
    arrangers: Dict[str, Callable[[Sequence[str]], str]] = {
        "random": lambda ws: _random(ws, rng),
        "ascending": _ascending,
        "chiasmus": _chiasmus,
        "spiral": _spiral,
    }
    poem = arrangers.get(structure, arrangers["random"])(words)

    return ConstraintResult.passed(
        poem,
        [
            "Try different structures",
            "Experiment with word order",
            "Add more words for variety",
        ],
        {
            "constraint_type": "combinatorial_poem",
            "structure": structure,
            "word_count": len(words),
            "input_words": words,
        },
    )


class CombinatorialGenerator(Generator):
    """Generates a poem from the whitespace-separated words of the prompt."""

    name = "combinatorial"
    description = "Arranges a set of words into lines by a named structure"

    def __init__(self, structure: str = "random", rng: Optional[random.Random] = None):
        self.structure = structure
        self.rng = rng

    def generate(self, prompt: str) -> ConstraintResult:
        return generate_combinatorial_poem(prompt.split(), self.structure, self.rng)
