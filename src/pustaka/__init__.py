"""Relevance and classification engine for the Pustaka library catalog."""

__version__ = "0.1.0"
