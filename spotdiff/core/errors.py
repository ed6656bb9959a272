"""Errors raised by the puzzle core for invalid requests."""

from __future__ import annotations


class PuzzleError(ValueError):
    """Base class for puzzle generation errors."""


class InvalidSize(PuzzleError):
    """Grid size below the 2x2 minimum."""


class InvalidDifferenceCount(PuzzleError):
    """Difference count outside 1..size*size."""


class AlphabetTooSmall(PuzzleError):
    """Alphabet cannot produce a differing symbol."""


class OutOfRangeLevel(ValueError):
    """Level index outside the curriculum."""
