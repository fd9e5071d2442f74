"""
Constraint workflows: declare a bundle of constraints and bounds once, run it
against many texts. Generation workflows record a theme, the constraints
generated text must meet and how many attempts to allow.

Declaring and running are separate steps. The builder only records names and
configuration; names are resolved against the registry when the workflow is
run by OulipoService.check_with_workflow.
"""

import copy
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import ValidationError

from .errors import InvalidConfigError, UnknownPresetError
from .schemas.results import ConstraintWorkflowConfig, GenerationWorkflowConfig, ValidationConfig

DEFAULT_GENERATION_THEME = "creative writing"
DEFAULT_MAX_ATTEMPTS = 10


class ConstraintWorkflowBuilder:
    """Builder class for creating constraint workflows with a fluent interface."""

    def __init__(self):
        self._constraints: List[Tuple[str, Any]] = []
        self._bounds: Dict[str, Optional[int]] = {}

    def with_constraint(self, name: str, config: Any = None) -> "ConstraintWorkflowBuilder":
        """Add a constraint by registry name and configuration."""
        self._constraints.append((name, copy.deepcopy(config)))
        return self

    def with_univocalic(self, allowed_vowel: str) -> "ConstraintWorkflowBuilder":
        return self.with_constraint("univocalic", {"allowed_vowel": allowed_vowel})

    def with_lipogram(self, forbidden_letter: str) -> "ConstraintWorkflowBuilder":
        return self.with_constraint("lipogram", {"forbidden_letter": forbidden_letter})

    def with_length_limits(
        self, min_length: Optional[int] = None, max_length: Optional[int] = None
    ) -> "ConstraintWorkflowBuilder":
        """Set text length bounds. A later call replaces earlier bounds."""
        self._bounds["min_length"] = min_length
        self._bounds["max_length"] = max_length
        return self

    def with_word_limits(
        self, min_words: Optional[int] = None, max_words: Optional[int] = None
    ) -> "ConstraintWorkflowBuilder":
        """Set word count bounds. A later call replaces earlier bounds."""
        self._bounds["min_words"] = min_words
        self._bounds["max_words"] = max_words
        return self

    def build(self) -> ConstraintWorkflowConfig:
        """Freeze the accumulated state into an immutable workflow config.

        Raises:
            InvalidConfigError: if a bound is negative or not an integer
        """
        try:
            validation_config = ValidationConfig(**self._bounds)
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise InvalidConfigError(f"Invalid bound '{field}': {error['msg']}") from e
        return ConstraintWorkflowConfig(
            constraints=tuple(self._constraints),
            validation_config=validation_config,
        )


class GenerationWorkflowBuilder:
    """Collects a theme, required constraint names and an attempt budget."""

    def __init__(self):
        self._theme: Optional[str] = None
        self._constraints: List[str] = []
        self._max_attempts = DEFAULT_MAX_ATTEMPTS

    def with_theme(self, theme: str) -> "GenerationWorkflowBuilder":
        self._theme = theme
        return self

    def with_constraint(self, name: str) -> "GenerationWorkflowBuilder":
        """Name a constraint that generated text must satisfy."""
        self._constraints.append(name)
        return self

    def max_attempts(self, attempts: int) -> "GenerationWorkflowBuilder":
        self._max_attempts = attempts
        return self

    def build(self) -> GenerationWorkflowConfig:
        """Raises InvalidConfigError if max_attempts is below 1."""
        try:
            return GenerationWorkflowConfig(
                theme=self._theme if self._theme is not None else DEFAULT_GENERATION_THEME,
                constraints=tuple(self._constraints),
                max_attempts=self._max_attempts,
            )
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid max_attempts: {e.errors()[0]['msg']}") from e


# Pre-built constraint combinations
class ConstraintPresets:
    """Common workflow presets."""

    @staticmethod
    def strict_writing() -> ConstraintWorkflowBuilder:
        """Moderate-length prose with bounded word count."""
        return (ConstraintWorkflowBuilder()
                .with_length_limits(100, 1000)
                .with_word_limits(10, 200))

    @staticmethod
    def minimal() -> ConstraintWorkflowBuilder:
        """Very short texts only."""
        return (ConstraintWorkflowBuilder()
                .with_length_limits(10, 100)
                .with_word_limits(3, 20))

    @staticmethod
    def experimental() -> ConstraintWorkflowBuilder:
        """An 'e'-only univocalic of at least 50 characters."""
        return (ConstraintWorkflowBuilder()
                .with_univocalic("e")
                .with_length_limits(50, None))


PRESETS: Dict[str, Callable[[], ConstraintWorkflowBuilder]] = {
    "strict": ConstraintPresets.strict_writing,
    "strict_writing": ConstraintPresets.strict_writing,
    "minimal": ConstraintPresets.minimal,
    "experimental": ConstraintPresets.experimental,
}


def preset_config(preset_name: str) -> ConstraintWorkflowConfig:
    """Resolve a preset name to a built workflow config.

    Raises:
        UnknownPresetError: if the name is not a known preset
    """
    factory = PRESETS.get(preset_name)
    if factory is None:
        raise UnknownPresetError(
            f"Unknown preset: {preset_name}. "
            f"Available presets: {', '.join(sorted(PRESETS))}"
        )
    return factory().build()
