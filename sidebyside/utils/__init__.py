"""
Shared utilities for SIDEBYSIDE.

Common functionality used across contexts:
- Text normalization
- Logging setup
- Timestamps
"""

from sidebyside.utils.text_processing import normalize_indentation
from sidebyside.utils.timestamp import now

__all__ = ["normalize_indentation", "now"]
