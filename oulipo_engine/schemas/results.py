"""
Result and configuration models shared by every constraint, transform,
validator and workflow.

All models are frozen and hold their sequences as tuples, so a returned
result cannot be edited in place. metadata is a fresh dict per call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, conint


class Violation(BaseModel):
    """A single located infraction.

    position and length are code-point offsets into the original text.
    Whole-text problems (length bounds, structural sestina errors) use
    position 0 and the full text length, or 0, as a sentinel span.
    """

    model_config = ConfigDict(frozen=True)

    position: conint(ge=0)
    length: conint(ge=0)
    issue: str
    suggestion: Optional[str] = None


class ConstraintResult(BaseModel):
    """Outcome of a single constraint check, transform or generation."""

    model_config = ConfigDict(frozen=True)

    success: bool
    result: Optional[str] = None
    violations: Tuple[Violation, ...] = ()
    suggestions: Tuple[str, ...] = ()
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def passed(
        cls,
        result: str,
        suggestions: List[str],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ConstraintResult":
        """Create a successful result."""
        return cls(
            success=True,
            result=result,
            violations=(),
            suggestions=suggestions,
            metadata=metadata or {},
        )

    @classmethod
    def failed(
        cls,
        result: Optional[str],
        violations: List[Violation],
        suggestions: List[str],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ConstraintResult":
        """Create a failed result with violations."""
        return cls(
            success=False,
            result=result,
            violations=violations,
            suggestions=suggestions,
            metadata=metadata or {},
        )

    @property
    def violation_count(self) -> int:
        return len(self.violations)


class ValidationConfig(BaseModel):
    """Optional length and word-count bounds. None means no bound."""

    model_config = ConfigDict(frozen=True)

    min_length: Optional[conint(ge=0)] = None
    max_length: Optional[conint(ge=0)] = None
    min_words: Optional[conint(ge=0)] = None
    max_words: Optional[conint(ge=0)] = None

    @property
    def has_length_bounds(self) -> bool:
        return self.min_length is not None or self.max_length is not None

    @property
    def has_word_bounds(self) -> bool:
        return self.min_words is not None or self.max_words is not None


@dataclass(frozen=True)
class ConstraintInfo:
    """Registry introspection record for one constraint type.

    Derived from a factory at query time, never stored.
    """

    name: str
    description: str
    schema: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for API responses."""
        return {
            "name": self.name,
            "description": self.description,
            "schema": self.schema,
        }


class ConstraintWorkflowConfig(BaseModel):
    """A reusable bundle of named constraints plus validation bounds.

    Constraint names are not resolved here; resolution happens when the
    workflow is run against a registry.
    """

    model_config = ConfigDict(frozen=True)

    constraints: Tuple[Tuple[str, Any], ...] = ()
    validation_config: ValidationConfig = Field(default_factory=ValidationConfig)

    @property
    def constraint_names(self) -> List[str]:
        return [name for name, _ in self.constraints]


class GenerationWorkflowConfig(BaseModel):
    """Theme, required constraint names and attempt budget for a generation run."""

    model_config = ConfigDict(frozen=True)

    theme: str
    constraints: Tuple[str, ...] = ()
    max_attempts: conint(ge=1) = 10


class WorkflowResult(BaseModel):
    """Aggregate of running a workflow against one text.

    constraint_results holds the named-constraint results in declaration
    order, followed by the validation results.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    constraint_results: Tuple[ConstraintResult, ...] = ()
    summary: str

    @property
    def failed_count(self) -> int:
        return sum(1 for result in self.constraint_results if not result.success)
