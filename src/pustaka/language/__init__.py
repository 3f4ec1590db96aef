"""Heuristic language classification."""

from .detection import (
    LanguageDetection,
    LanguageScore,
    classify_title,
    detect_language,
    detect_language_from_title,
    explain_language,
)

__all__ = [
    "LanguageDetection",
    "LanguageScore",
    "classify_title",
    "detect_language",
    "detect_language_from_title",
    "explain_language",
]
