"""
Error taxonomy for the Oulipo engine.

Only configuration problems are errors. A text that breaks a rule is a normal
outcome and is reported as a ConstraintResult with success=False, never raised.

Error codes:
- INVALID_CONFIG: malformed or missing constraint parameters, unknown constraint name
- UNKNOWN_PRESET: workflow preset name not recognised
- GENERATION_FAILED: a generator could not produce output
"""

from __future__ import annotations


class OulipoError(Exception):
    """
    Base error for the Oulipo engine.

    Attributes:
        code: Stable error code for programmatic handling
        message: Human-readable error description
    """

    code = "OULIPO_ERROR"

    def __init__(self, message: str, code: str | None = None):
        if code is not None:
            self.code = code
        self.message = message
        super().__init__(f"{self.code}: {message}")

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "error": "oulipo_error",
            "code": self.code,
            "message": self.message,
        }


class InvalidConfigError(OulipoError):
    """Raised when a constraint cannot be built from the given parameters."""

    code = "INVALID_CONFIG"


class UnknownPresetError(OulipoError):
    """Raised when a workflow preset name is not recognised."""

    code = "UNKNOWN_PRESET"


class GenerationError(OulipoError):
    """Raised when a generator fails to produce text."""

    code = "GENERATION_FAILED"
