"""
OulipoService -- facade over every constraint, transform, generator,
validator and workflow.

The service owns one Dictionary and one ConstraintRegistry, both built at
construction and never mutated afterwards, so a single instance can serve
concurrent callers without locking.

Rule failures come back as ConstraintResult(success=False). Only bad
configuration raises (InvalidConfigError, UnknownPresetError), plus
GenerationError when a generator has nothing to work with.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..constraints import (
    Constraint,
    LipogramConstraint,
    SestinaConstraint,
    UnivocalicConstraint,
    check_palindrome,
    check_prisoners,
    check_snowball,
    n_plus_7_transform,
)
from ..constraints.n_plus_7 import DEFAULT_OFFSET
from ..dictionary import Dictionary
from ..errors import GenerationError, InvalidConfigError, OulipoError
from ..generators import (
    check_anagram,
    generate_anagrams,
    generate_combinatorial_poem,
    generate_haiku,
)
from ..registry import ConstraintRegistry
from ..schemas.results import (
    ConstraintInfo,
    ConstraintResult,
    ConstraintWorkflowConfig,
    ValidationConfig,
    Violation,
    WorkflowResult,
)
from ..validators import CharacterFrequencyConstraint, TextLengthConstraint, WordCountConstraint
from ..validators import validate_with_config as _validate_with_config
from ..workflows import ConstraintWorkflowBuilder, GenerationWorkflowBuilder, preset_config

logger = logging.getLogger(__name__)


class OulipoService:
    """
    Main entry point for constraint checking and text generation.

    Usage:
        service = OulipoService()
        result = service.check_univocalic("A cat sat at a mat", "a")

        workflow = service.create_workflow().with_univocalic("a").with_word_limits(3, 20).build()
        outcome = service.check_with_workflow("A cat and a rat ran fast", workflow)
    """

    def __init__(
        self,
        dictionary: Optional[Dictionary] = None,
        registry: Optional[ConstraintRegistry] = None,
    ):
        self._dictionary = dictionary if dictionary is not None else Dictionary()
        self._registry = registry if registry is not None else ConstraintRegistry()
        logger.info(
            f"OulipoService ready: {len(self._dictionary)} dictionary words, "
            f"{len(self._registry)} constraint types"
        )

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    # Constraint checks

    def check_lipogram(self, text: str, forbidden_letter: str) -> ConstraintResult:
        return LipogramConstraint(forbidden_letter).check(text)

    def n_plus_7_transform(self, text: str, offset: int = DEFAULT_OFFSET) -> ConstraintResult:
        return n_plus_7_transform(text, offset, self._dictionary)

    def check_palindrome(self, text: str) -> ConstraintResult:
        return check_palindrome(text)

    def check_snowball(self, text: str) -> ConstraintResult:
        return check_snowball(text)

    def check_prisoners_constraint(self, text: str) -> ConstraintResult:
        return check_prisoners(text)

    def check_univocalic(self, text: str, vowel: str) -> ConstraintResult:
        """Check the univocalic rule.

        An empty vowel gives a failing result; a non-vowel raises
        InvalidConfigError.
        """
        if not vowel:
            return ConstraintResult.failed(
                None,
                [
                    Violation(
                        position=0,
                        length=0,
                        issue="Invalid vowel parameter",
                        suggestion="Provide a single vowel character",
                    )
                ],
                ["Provide a single vowel character"],
            )
        return UnivocalicConstraint(vowel).check(text)

    def check_sestina(self, text: str, end_words: Sequence[str]) -> ConstraintResult:
        return SestinaConstraint(end_words).check(text)

    # Generators

    def generate_haiku(self, theme: Optional[str] = None) -> str:
        result = generate_haiku(theme or "nature")
        if not result.success or not result.result:
            raise GenerationError("Failed to generate haiku")
        return result.result

    def generate_anagrams(self, word: str, max_results: int = 10) -> List[str]:
        if max_results < 1:
            raise InvalidConfigError(f"max_results must be at least 1, got {max_results}")
        result = generate_anagrams(word)
        if not result.success:
            raise GenerationError(result.violations[0].issue)
        return list(result.metadata["anagrams"])[:max_results]

    def check_anagram(self, word1: str, word2: str) -> bool:
        return check_anagram(word1, word2).success

    def generate_combinatorial_poem(
        self,
        word_sets: Sequence[Sequence[str]],
        pattern: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ) -> str:
        words = [word for word_set in word_sets for word in word_set]
        result = generate_combinatorial_poem(words, pattern or "random", rng)
        if not result.success:
            raise GenerationError(result.violations[0].issue)
        return result.result or ""

    # Validators

    def validate_text_length(
        self, text: str, min_length: int = 0, max_length: Optional[int] = None
    ) -> ConstraintResult:
        return TextLengthConstraint(min_length, max_length).check(text)

    def validate_word_count(
        self, text: str, min_words: int = 0, max_words: Optional[int] = None
    ) -> ConstraintResult:
        return WordCountConstraint(min_words, max_words).check(text)

    def check_character_frequency(
        self, text: str, target_char: str, max_frequency: int
    ) -> ConstraintResult:
        return CharacterFrequencyConstraint(target_char, max_frequency).check(text)

    def validate_with_config(self, text: str, config: ValidationConfig) -> List[ConstraintResult]:
        return _validate_with_config(text, config)

    # Suggestions

    def generate_lipogram_suggestions(self, text: str, forbidden_letter: str) -> List[str]:
        """One rewrite hint per word containing the forbidden letter."""
        letter = (forbidden_letter or "e")[0]
        suggestions = [
            f"Replace '{word}' with a word that doesn't contain '{letter}'"
            for word in text.split()
            if letter.lower() in word.lower()
        ]
        return suggestions or ["Text already follows lipogram constraint"]

    def generate_palindrome_suggestions(self, text: str) -> List[str]:
        return [
            "Try rearranging words to create symmetry",
            "Consider using palindromic words like 'level', 'radar', 'civic'",
            "Build from the center outward for sentence palindromes",
            f"Current text: '{text}' - work on making it read the same "
            "forwards and backwards",
        ]

    # Registry and workflows

    def constraint_registry(self) -> ConstraintRegistry:
        return self._registry

    def create_custom_constraint(self, name: str, config: Any = None) -> Constraint:
        return self._registry.create_constraint(name, config)

    def list_available_constraints(self) -> List[ConstraintInfo]:
        return self._registry.list_constraints()

    def create_workflow(self) -> ConstraintWorkflowBuilder:
        return ConstraintWorkflowBuilder()

    def create_generation_workflow(self) -> GenerationWorkflowBuilder:
        return GenerationWorkflowBuilder()

    def create_constraint_workflow(
        self, entries: Iterable[Dict[str, Any]]
    ) -> ConstraintWorkflowConfig:
        """Build a workflow from loose entry dicts.

        Each entry has a "type": "length" and "words" take "min"/"max",
        "univocalic" takes "vowel", "lipogram" takes "letter", and any other
        type is passed through as a registry name with "config".
        """
        builder = self.create_workflow()
        for entry in entries:
            kind = entry.get("type")
            if not isinstance(kind, str) or not kind:
                raise InvalidConfigError(f"Workflow entry is missing 'type': {entry!r}")
            if kind == "length":
                builder.with_length_limits(entry.get("min"), entry.get("max"))
            elif kind == "words":
                builder.with_word_limits(entry.get("min"), entry.get("max"))
            elif kind == "univocalic" and "vowel" in entry:
                builder.with_univocalic(entry["vowel"])
            elif kind == "lipogram" and "letter" in entry:
                builder.with_lipogram(entry["letter"])
            else:
                builder.with_constraint(kind, entry.get("config", {}))
        return builder.build()

    def check_with_workflow(
        self, text: str, config: ConstraintWorkflowConfig
    ) -> WorkflowResult:
        """Run every configured constraint, then the validation bounds.

        Results keep declaration order with validation results last. A
        constraint that cannot be built becomes one failing result and the
        rest of the workflow still runs.
        """
        results = [
            self._run_workflow_constraint(name, constraint_config, text)
            for name, constraint_config in config.constraints
        ]
        results.extend(self.validate_with_config(text, config.validation_config))

        success = all(result.success for result in results)
        summary = self._workflow_summary(results)
        logger.info(f"Workflow checked: {summary}")
        return WorkflowResult(success=success, constraint_results=results, summary=summary)

    def check_with_preset(self, text: str, preset_name: str) -> WorkflowResult:
        return self.check_with_workflow(text, preset_config(preset_name))

    def _run_workflow_constraint(
        self, name: str, constraint_config: Any, text: str
    ) -> ConstraintResult:
        if name not in self._registry:
            logger.warning(f"Workflow references unknown constraint '{name}'")
            return ConstraintResult.failed(
                f"Unknown constraint: {name}",
                [],
                ["Check constraint name"],
                {"error": "unknown_constraint", "constraint": name},
            )
        try:
            constraint = self._registry.create_constraint(name, constraint_config)
        except OulipoError as e:
            logger.warning(f"Workflow constraint '{name}' has invalid config: {e.message}")
            return ConstraintResult.failed(
                f"Invalid configuration for {name}: {e.message}",
                [],
                ["Check constraint configuration"],
                {"error": "invalid_config", "constraint": name, "message": e.message},
            )
        return constraint.check(text)

    @staticmethod
    def _workflow_summary(results: Sequence[ConstraintResult]) -> str:
        total = len(results)
        failed = sum(1 for result in results if not result.success)
        if failed == 0:
            return f"✅ All {total} constraints satisfied"
        return f"❌ {failed}/{total} constraints failed"
