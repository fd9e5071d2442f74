"""Pydantic models for results, workflow configuration and API requests."""

from .results import (
    ConstraintInfo,
    ConstraintResult,
    ConstraintWorkflowConfig,
    GenerationWorkflowConfig,
    ValidationConfig,
    Violation,
    WorkflowResult,
)

__all__ = [
    "ConstraintInfo",
    "ConstraintResult",
    "ConstraintWorkflowConfig",
    "GenerationWorkflowConfig",
    "ValidationConfig",
    "Violation",
    "WorkflowResult",
]
