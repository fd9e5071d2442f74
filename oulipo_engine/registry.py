"""
ConstraintRegistry -- name-keyed constraint factories.

A factory turns a JSON-like configuration value into a live Constraint. The
registry is the single place where constraint names are resolved: workflow
execution, the HTTP surface and the CLI all go through it.

Usage:
    registry = ConstraintRegistry()
    constraint = registry.create_constraint("univocalic", {"allowed_vowel": "a"})
    result = constraint.check("A cat sat at a mat")

    checker = BatchConstraintChecker()
    checker.add_constraint(constraint)
    checker.add_constraint(registry.create_constraint("lipogram", {"forbidden_letter": "e"}))
    results = checker.check_all(text)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type

from .constraints import (
    Constraint,
    LipogramConstraint,
    PalindromeConstraint,
    PrisonersConstraint,
    SestinaConstraint,
    SnowballConstraint,
    UnivocalicConstraint,
)
from .errors import InvalidConfigError
from .schemas.results import ConstraintInfo, ConstraintResult
from .validators import (
    CharacterFrequencyConstraint,
    TextLengthConstraint,
    WordCountConstraint,
)

logger = logging.getLogger(__name__)

_NO_CONFIG_SCHEMA: Dict[str, Any] = {"type": "object", "properties": {}, "required": []}


def _as_mapping(config: Any, constraint_name: str) -> Mapping[str, Any]:
    if config is None:
        return {}
    if not isinstance(config, Mapping):
        raise InvalidConfigError(
            f"Configuration for '{constraint_name}' must be an object, "
            f"got {type(config).__name__}"
        )
    return config


def _required_str(config: Mapping[str, Any], key: str) -> str:
    value = config.get(key)
    if not isinstance(value, str) or not value:
        raise InvalidConfigError(f"Missing '{key}' in config")
    return value


def _optional_int(config: Mapping[str, Any], key: str) -> Optional[int]:
    value = config.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigError(f"'{key}' must be an integer, got {value!r}")
    return value


class ConstraintFactory(ABC):
    """Builds one kind of constraint from configuration."""

    constraint_class: Type[Constraint]

    @property
    def name(self) -> str:
        return self.constraint_class.name

    @property
    def description(self) -> str:
        return self.constraint_class.description

    @abstractmethod
    def create(self, config: Any) -> Constraint:
        """Create a constraint instance. Raises InvalidConfigError on bad config."""

    def config_schema(self) -> Dict[str, Any]:
        return dict(_NO_CONFIG_SCHEMA)

    def info(self) -> ConstraintInfo:
        return ConstraintInfo(
            name=self.name, description=self.description, schema=self.config_schema()
        )


class UnivocalicFactory(ConstraintFactory):
    constraint_class = UnivocalicConstraint

    def create(self, config: Any) -> Constraint:
        config = _as_mapping(config, self.name)
        return UnivocalicConstraint(_required_str(config, "allowed_vowel"))

    def config_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "allowed_vowel": {
                    "type": "string",
                    "pattern": "^[aeiouAEIOU]$",
                    "description": "The only vowel allowed in the text",
                }
            },
            "required": ["allowed_vowel"],
        }


class LipogramFactory(ConstraintFactory):
    constraint_class = LipogramConstraint

    def create(self, config: Any) -> Constraint:
        config = _as_mapping(config, self.name)
        return LipogramConstraint(_required_str(config, "forbidden_letter"))

    def config_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "forbidden_letter": {
                    "type": "string",
                    "minLength": 1,
                    "maxLength": 1,
                    "description": "The letter the text must avoid",
                }
            },
            "required": ["forbidden_letter"],
        }


class _NoConfigFactory(ConstraintFactory):
    def create(self, config: Any) -> Constraint:
        _as_mapping(config, self.name)
        return self.constraint_class()


class PalindromeFactory(_NoConfigFactory):
    constraint_class = PalindromeConstraint


class SnowballFactory(_NoConfigFactory):
    constraint_class = SnowballConstraint


class PrisonersFactory(_NoConfigFactory):
    constraint_class = PrisonersConstraint


class SestinaFactory(ConstraintFactory):
    constraint_class = SestinaConstraint

    def create(self, config: Any) -> Constraint:
        config = _as_mapping(config, self.name)
        end_words = config.get("end_words")
        if not isinstance(end_words, list):
            raise InvalidConfigError("Missing 'end_words' in config")
        return SestinaConstraint(end_words)

    def config_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "end_words": {
                    "type": "array",
                    "items": {"type": "string"},
                    "minItems": 6,
                    "maxItems": 6,
                    "description": "The six words that end the sestina's lines",
                }
            },
            "required": ["end_words"],
        }


class TextLengthFactory(ConstraintFactory):
    constraint_class = TextLengthConstraint

    def create(self, config: Any) -> Constraint:
        config = _as_mapping(config, self.name)
        return TextLengthConstraint(
            _optional_int(config, "min_length") or 0,
            _optional_int(config, "max_length"),
        )

    def config_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "min_length": {"type": "integer", "minimum": 0},
                "max_length": {"type": "integer", "minimum": 0},
            },
            "required": [],
        }


class WordCountFactory(ConstraintFactory):
    constraint_class = WordCountConstraint

    def create(self, config: Any) -> Constraint:
        config = _as_mapping(config, self.name)
        return WordCountConstraint(
            _optional_int(config, "min_words") or 0,
            _optional_int(config, "max_words"),
        )

    def config_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "min_words": {"type": "integer", "minimum": 0},
                "max_words": {"type": "integer", "minimum": 0},
            },
            "required": [],
        }


class CharacterFrequencyFactory(ConstraintFactory):
    constraint_class = CharacterFrequencyConstraint

    def create(self, config: Any) -> Constraint:
        config = _as_mapping(config, self.name)
        max_frequency = _optional_int(config, "max_frequency")
        if max_frequency is None:
            raise InvalidConfigError("Missing 'max_frequency' in config")
        return CharacterFrequencyConstraint(
            _required_str(config, "target_char"), max_frequency
        )

    def config_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "target_char": {"type": "string", "minLength": 1, "maxLength": 1},
                "max_frequency": {"type": "integer", "minimum": 0},
            },
            "required": ["target_char", "max_frequency"],
        }


BUILTIN_FACTORIES: tuple = (
    UnivocalicFactory,
    LipogramFactory,
    PalindromeFactory,
    SnowballFactory,
    PrisonersFactory,
    SestinaFactory,
    TextLengthFactory,
    WordCountFactory,
    CharacterFrequencyFactory,
)


class ConstraintRegistry:
    """
    Name-keyed collection of constraint factories.

    Built once with every built-in factory registered. Listing never fails
    and reflects exactly what has been registered, in registration order.
    """

    def __init__(self, factories: Optional[Iterable[ConstraintFactory]] = None):
        self._factories: Dict[str, ConstraintFactory] = {}
        if factories is None:
            factories = (factory() for factory in BUILTIN_FACTORIES)
        for factory in factories:
            self.register(factory)

    def register(self, factory: ConstraintFactory) -> None:
        """Register a factory under its name, replacing any previous one."""
        if factory.name in self._factories:
            logger.warning(f"Replacing existing constraint factory: '{factory.name}'")
        self._factories[factory.name] = factory
        logger.debug(f"Registered constraint: {factory.name}")

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def create_constraint(self, name: str, config: Any = None) -> Constraint:
        """Create a constraint by name.

        Raises:
            InvalidConfigError: unknown name, or config rejected by the factory
        """
        factory = self._factories.get(name)
        if factory is None:
            raise InvalidConfigError(f"Unknown constraint: {name}")
        return factory.create(config)

    def available_constraints(self) -> List[str]:
        return list(self._factories)

    def get_config_schema(self, name: str) -> Optional[Dict[str, Any]]:
        factory = self._factories.get(name)
        return factory.config_schema() if factory else None

    def get_constraint_info(self, name: str) -> Optional[ConstraintInfo]:
        factory = self._factories.get(name)
        return factory.info() if factory else None

    def list_constraints(self) -> List[ConstraintInfo]:
        return [factory.info() for factory in self._factories.values()]


class BatchConstraintChecker:
    """Runs a list of already-built constraints against one text."""

    def __init__(self, constraints: Optional[Iterable[Constraint]] = None):
        self._constraints: List[Constraint] = list(constraints or [])

    def add_constraint(self, constraint: Constraint) -> None:
        self._constraints.append(constraint)

    def __len__(self) -> int:
        return len(self._constraints)

    def check_all(self, text: str) -> List[ConstraintResult]:
        """Run every constraint, in the order added. No short-circuiting."""
        return [constraint.check(text) for constraint in self._constraints]

    def check_all_pass(self, text: str) -> bool:
        """True only if every constraint passes; stops at the first failure."""
        return all(constraint.check(text).success for constraint in self._constraints)
