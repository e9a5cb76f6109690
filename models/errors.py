"""Exceptions raised by the decision engine."""

from __future__ import annotations


class PaintCheckError(Exception):
    """Base class for failures of a single evaluation."""


class InvalidInputError(PaintCheckError, ValueError):
    """A reading was missing, non-numeric, or outside its physical range."""


class ComputationError(PaintCheckError, ArithmeticError):
    """The dew-point formula hit a singularity or produced a non-finite value."""
