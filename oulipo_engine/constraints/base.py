"""
Capability interfaces for rules, transforms and generators.

Code that holds "a constraint" only ever talks to these interfaces, so new
rules are added by subclassing Constraint and registering a factory, never by
extending a closed list of rule names.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

from ..schemas.results import ConstraintResult


class Constraint(ABC):
    """
    Abstract base class for all constraints.

    A constraint's configuration is fixed at construction. Bad configuration
    must raise InvalidConfigError from __init__; check() never raises for
    well-formed text, it reports violations instead.
    """

    name: str = ""
    description: str = ""

    @abstractmethod
    def check(self, text: str) -> ConstraintResult:
        """Check if the given text satisfies this constraint."""

    def get_config(self) -> Dict[str, Any]:
        """Return the configuration this constraint was built with."""
        return {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.get_config()!r})"


class Transformer(ABC):
    """Abstract base class for text transforms such as N+7."""

    name: str = ""
    description: str = ""

    @abstractmethod
    def transform(self, text: str) -> ConstraintResult:
        """Transform text. The transformed text is returned in result."""


class Generator(ABC):
    """Abstract base class for text generators."""

    name: str = ""
    description: str = ""

    @abstractmethod
    def generate(self, prompt: str) -> ConstraintResult:
        """Generate text. The generated text is returned in result."""
