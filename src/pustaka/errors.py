"""Exception types raised inside the classification and matching engine."""

from __future__ import annotations


class PustakaError(Exception):
    """Base class for engine errors."""


class ClassificationError(PustakaError):
    """A classifier or extractor could not evaluate its input."""


class InvalidMetadataError(ClassificationError, ValueError):
    """Structured metadata carries values the scorer cannot compare."""
