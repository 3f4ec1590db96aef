"""Text normalization primitives."""

from .normalize import NormalizedText, fold_for_sort, lowercase, normalize, normalize_text

__all__ = ["NormalizedText", "fold_for_sort", "lowercase", "normalize", "normalize_text"]
