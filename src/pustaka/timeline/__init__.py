"""Publication-year parsing and historical eras."""

from .years import era_for_year, era_label, extract_year

__all__ = ["era_for_year", "era_label", "extract_year"]
