"""Test configuration and fixtures."""

from typing import Iterator, List

import pytest

from oulipo_engine.config import reset_settings
from oulipo_engine.constraints.sestina import ROTATION
from oulipo_engine.core.service import OulipoService
from oulipo_engine.dictionary import Dictionary
from oulipo_engine.registry import ConstraintRegistry

END_WORDS = ["stone", "river", "light", "bread", "window", "time"]


def make_sestina(end_words: List[str] = END_WORDS, envoi: int = 3) -> str:
    """Build a sestina whose stanzas follow the end-word rotation."""
    lines = []
    for stanza, pattern in enumerate(ROTATION, 1):
        for word_index in pattern:
            lines.append(f"In stanza {stanza} the line ends on {end_words[word_index]}")
    for i in range(envoi):
        lines.append(f"Envoi line {i + 1} gathers everything")
    return "\n".join(lines)


@pytest.fixture
def service() -> OulipoService:
    """Create a service with the default dictionary and registry."""
    return OulipoService()


@pytest.fixture
def registry() -> ConstraintRegistry:
    return ConstraintRegistry()


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary()


@pytest.fixture
def end_words() -> List[str]:
    return list(END_WORDS)


@pytest.fixture
def sestina_text() -> str:
    return make_sestina()


@pytest.fixture
def build_sestina():
    return make_sestina


@pytest.fixture
def fresh_settings(monkeypatch) -> Iterator[pytest.MonkeyPatch]:
    """Yield monkeypatch; settings are re-read from the environment afterwards."""
    yield monkeypatch
    monkeypatch.undo()
    reset_settings()
