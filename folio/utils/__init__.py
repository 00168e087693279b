"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logging setup
- Configuration loading
- Date parsing and formatting
- Slug generation
"""

from folio.utils.text_processing import slugify
from folio.utils.timestamp import format_date, parse_timestamp

__all__ = ["format_date", "parse_timestamp", "slugify"]
