"""Topic taxonomy for catalog titles."""

from .topics import extract_topics, load_thesaurus, match_topics

__all__ = ["extract_topics", "load_thesaurus", "match_topics"]
