"""
Sestina: six six-line stanzas plus a three-line envoi, 39 lines in all.

Each stanza's line endings follow a fixed rotation of the six end words:

    stanza 1: 1 2 3 4 5 6
    stanza 2: 6 1 5 2 4 3
    stanza 3: 3 6 4 1 2 5
    stanza 4: 5 3 2 6 1 4
    stanza 5: 4 5 1 3 6 2
    stanza 6: 2 4 6 5 3 1

The envoi is counted but its endings are not checked.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from ..errors import InvalidConfigError
from ..schemas.results import ConstraintResult, Violation
from .base import Constraint

logger = logging.getLogger(__name__)

END_WORD_COUNT = 6
STANZA_COUNT = 6
ENVOI_LINES = 3
EXPECTED_LINES = STANZA_COUNT * END_WORD_COUNT + ENVOI_LINES

ROTATION = (
    (0, 1, 2, 3, 4, 5),
    (5, 0, 4, 1, 3, 2),
    (2, 5, 3, 0, 1, 4),
    (4, 2, 1, 5, 0, 3),
    (3, 4, 0, 2, 5, 1),
    (1, 3, 5, 4, 2, 0),
)


def _split_lines(text: str) -> List[Tuple[int, str]]:
    """Return (offset of stripped line, stripped line) for each line.

    Lines end at "\\n" only, with one trailing "\\r" dropped. A final newline
    does not open an empty last line.
    """
    lines = []
    offset = 0
    for raw in text.split("\n"):
        body = raw[:-1] if raw.endswith("\r") else raw
        lead = len(body) - len(body.lstrip())
        lines.append((offset + lead, body.strip()))
        offset += len(raw) + 1
    if not text or text.endswith("\n"):
        lines.pop()
    return lines


def check(text: str, end_words: Sequence[str]) -> ConstraintResult:
    end_words = list(end_words)
    lines = _split_lines(text)

    if len(end_words) != END_WORD_COUNT:
        return ConstraintResult.failed(
            None,
            [
                Violation(
                    position=0,
                    length=len(text),
                    issue=(
                        f"Sestina requires exactly {END_WORD_COUNT} end words, "
                        f"got {len(end_words)}"
                    ),
                    suggestion="Provide exactly 6 end words for the sestina pattern",
                )
            ],
            ["A sestina uses 6 specific words that end each line in a rotating pattern"],
            {
                "constraint_type": "sestina",
                "provided_end_words": len(end_words),
                "required_end_words": END_WORD_COUNT,
            },
        )

    if len(lines) != EXPECTED_LINES:
        return ConstraintResult.failed(
            None,
            [
                Violation(
                    position=0,
                    length=len(text),
                    issue=(
                        f"Sestina should have {EXPECTED_LINES} lines "
                        f"(6 stanzas + 3-line envoi), found {len(lines)}"
                    ),
                    suggestion=(
                        "Structure: 6 stanzas of 6 lines each, "
                        "plus 3-line concluding envoi"
                    ),
                )
            ],
            [
                "Each stanza should have 6 lines",
                "End with a 3-line envoi (concluding tercet)",
                "Each line should end with one of the 6 designated words",
            ],
            {
                "constraint_type": "sestina",
                "line_count": len(lines),
                "expected_lines": EXPECTED_LINES,
            },
        )

    violations = []
    mismatched_lines = []
    for stanza_idx, pattern in enumerate(ROTATION):
        for line_idx, word_idx in enumerate(pattern):
            line_number = stanza_idx * END_WORD_COUNT + line_idx
            position, line = lines[line_number]
            expected = end_words[word_idx]
            if line.lower().endswith(expected.lower()):
                continue
            actual = line.split()[-1] if line.split() else ""
            mismatched_lines.append(line_number + 1)
            violations.append(
                Violation(
                    position=position,
                    length=len(line),
                    issue=(
                        f"Line {line_number + 1} should end with '{expected}', "
                        f"but ends with '{actual}'"
                    ),
                    suggestion=f"Rewrite line to end with '{expected}'",
                )
            )
    logger.debug("sestina check: %d mismatched line endings", len(violations))

    metadata = {
        "constraint_type": "sestina",
        "end_words": end_words,
        "violations_count": len(violations),
        "line_count": len(lines),
        "mismatched_lines": mismatched_lines,
    }
    if not violations:
        return ConstraintResult.passed(
            "Valid sestina structure", ["Perfect sestina structure!"], metadata
        )
    return ConstraintResult.failed(
        f"Sestina structure has {len(violations)} violations",
        violations,
        [
            "Check line endings match the sestina pattern",
            "Ensure each stanza follows the word rotation",
            "Verify the 3-line envoi uses all 6 words",
        ],
        metadata,
    )


class SestinaConstraint(Constraint):
    """Lines must end with the six end words in sestina rotation."""

    name = "sestina"
    description = "39 lines whose endings rotate six end words across six stanzas"

    def __init__(self, end_words: Sequence[str]):
        if isinstance(end_words, str) or not all(
            isinstance(word, str) and word.strip() for word in end_words
        ):
            raise InvalidConfigError("'end_words' must be a list of non-empty strings")
        self.end_words = list(end_words)

    def check(self, text: str) -> ConstraintResult:
        return check(text, self.end_words)

    def get_config(self) -> dict:
        return {"end_words": list(self.end_words)}
