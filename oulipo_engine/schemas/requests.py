"""Request bodies for the HTTP surface."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, conint, constr


class TextRequest(BaseModel):
    """Any request that carries a text to check."""

    text: str


class LipogramRequest(TextRequest):
    forbidden_letter: constr(min_length=1, max_length=1) = "e"


class UnivocalicRequest(TextRequest):
    vowel: str


class SestinaRequest(TextRequest):
    end_words: List[str]


class NPlusSevenRequest(TextRequest):
    offset: Optional[int] = None


class LengthValidationRequest(TextRequest):
    min_length: conint(ge=0) = 0
    max_length: Optional[conint(ge=0)] = None


class WordValidationRequest(TextRequest):
    min_words: conint(ge=0) = 0
    max_words: Optional[conint(ge=0)] = None


class CharacterFrequencyRequest(TextRequest):
    target_char: constr(min_length=1, max_length=1)
    max_frequency: conint(ge=0)


class HaikuRequest(BaseModel):
    theme: Optional[str] = None


class AnagramRequest(BaseModel):
    word: str
    max_results: Optional[conint(ge=1)] = None


class AnagramCheckRequest(BaseModel):
    word1: str
    word2: str


class CombinatorialRequest(BaseModel):
    word_sets: List[List[str]]
    pattern: Optional[str] = None


class WorkflowSpecRequest(BaseModel):
    """Loose workflow description, one entry per constraint.

    Each entry has a "type" ("length", "words", "univocalic", "lipogram" or a
    registry name) plus its parameters.
    """

    constraints: List[Dict[str, Any]] = Field(default_factory=list)


class WorkflowCheckRequest(WorkflowSpecRequest):
    text: str
