"""Characteristics composition and description drafting."""

from .composer import compose_characteristics
from .descriptions import DescriptionDraft, TemplateFamily, select_description, template_family

__all__ = [
    "DescriptionDraft",
    "TemplateFamily",
    "compose_characteristics",
    "select_description",
    "template_family",
]
