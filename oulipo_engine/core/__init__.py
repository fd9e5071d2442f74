"""Service facade for the Oulipo engine."""

from .service import OulipoService

__all__ = ["OulipoService"]
