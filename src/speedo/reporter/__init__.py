"""Reporter module.

Provides output formatting for measurements:
- Reporter: Fixed-width text report
- Layout helpers: pad, rule, crop_path, insert_separators
"""

from .layout import Align, crop_path, insert_separators, pad, rule
from .text import Reporter, print_report

__all__ = [
    "Align",
    "Reporter",
    "crop_path",
    "insert_separators",
    "pad",
    "print_report",
    "rule",
]
