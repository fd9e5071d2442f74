"""Template-driven text generators."""

from .anagram import AnagramGenerator, check_anagram, generate_anagrams
from .combinatorial import STRUCTURES, CombinatorialGenerator, generate_combinatorial_poem
from .haiku import HaikuGenerator
from .haiku import generate as generate_haiku

__all__ = [
    "AnagramGenerator",
    "CombinatorialGenerator",
    "HaikuGenerator",
    "STRUCTURES",
    "check_anagram",
    "generate_anagrams",
    "generate_combinatorial_poem",
    "generate_haiku",
]
