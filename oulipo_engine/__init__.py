"""
Oulipo Engine

Rule checking, transforms and generators for Oulipo-style constrained writing.
"""

import importlib.metadata

__version__ = importlib.metadata.version("oulipo-engine")

from .constraints import Constraint, Generator, Transformer
from .core import OulipoService
from .dictionary import Dictionary
from .errors import GenerationError, InvalidConfigError, OulipoError, UnknownPresetError
from .registry import BatchConstraintChecker, ConstraintRegistry
from .schemas import (
    ConstraintInfo,
    ConstraintResult,
    ConstraintWorkflowConfig,
    GenerationWorkflowConfig,
    ValidationConfig,
    Violation,
    WorkflowResult,
)
from .workflows import ConstraintPresets, ConstraintWorkflowBuilder, GenerationWorkflowBuilder

__all__ = [
    "BatchConstraintChecker",
    "Constraint",
    "ConstraintInfo",
    "ConstraintPresets",
    "ConstraintRegistry",
    "ConstraintResult",
    "ConstraintWorkflowBuilder",
    "ConstraintWorkflowConfig",
    "Dictionary",
    "GenerationError",
    "GenerationWorkflowBuilder",
    "GenerationWorkflowConfig",
    "Generator",
    "InvalidConfigError",
    "OulipoError",
    "OulipoService",
    "Transformer",
    "UnknownPresetError",
    "ValidationConfig",
    "Violation",
    "WorkflowResult",
]
