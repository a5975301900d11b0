"""Output module

Rendering of aligned lines and padding reports.
"""

from .formatter import OutputFormatter
from .stats import padding_statistics, padding_per_line

__all__ = [
    "OutputFormatter",
    "padding_statistics",
    "padding_per_line",
]
