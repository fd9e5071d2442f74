"""N+7: replace each known word with the word N places later in a dictionary."""

from __future__ import annotations

import logging
import re

from ..dictionary import Dictionary
from ..schemas.results import ConstraintResult
from .base import Transformer

logger = logging.getLogger(__name__)

DEFAULT_OFFSET = 7

# leading punctuation, core word, trailing punctuation
_TOKEN_RE = re.compile(r"^(\W*)(.*?)(\W*)$", re.DOTALL)


def _replace(token: str, offset: int, dictionary: Dictionary):
    prefix, core, suffix = _TOKEN_RE.match(token).groups()
    if not core:
        return None
    replacement = dictionary.get_n_plus_word(core, offset)
    if replacement is None:
        return None
    return f"{prefix}{replacement}{suffix}"


def transform(text: str, offset: int, dictionary: Dictionary) -> ConstraintResult:
    """Apply the N+7 transform. Words outside the vocabulary pass through verbatim.

    Always succeeds; the transformed text is in result.
    """
    words = text.split()
    transformed = []
    replacements = 0

    for word in words:
        replaced = _replace(word, offset, dictionary)
        if replaced is None:
            transformed.append(word)
        else:
            transformed.append(replaced)
            replacements += 1
    logger.debug("n+%d transform: %d/%d words replaced", offset, replacements, len(words))

    return ConstraintResult.passed(
        " ".join(transformed),
        [
            "Try different offset values for varied results",
            "Focus on noun-heavy text for better transformation",
        ],
        {
            "offset": offset,
            "original_words": len(words),
            "replacements_made": replacements,
            "replacement_rate": replacements / len(words) if words else 0.0,
        },
    )


class NPlusSevenTransformer(Transformer):
    """Replace each word with the word N positions later in the dictionary."""

    name = "n_plus_7"
    description = "Replace each word with the word N positions later in a word list"

    def __init__(self, dictionary: Dictionary, offset: int = DEFAULT_OFFSET):
        self.dictionary = dictionary
        self.offset = offset

    def transform(self, text: str) -> ConstraintResult:
        return transform(text, self.offset, self.dictionary)
