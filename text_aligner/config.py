"""Harness limits and report settings."""

from dataclasses import dataclass, asdict
from typing import Dict, Any

DEFAULT_MAX_LINES = 100
DEFAULT_MAX_LINE_LENGTH = 1024


@dataclass
class AlignerConfig:
    """Limits enforced while reading input, plus report settings

    The aligners themselves accept any number of lines of any length;
    these caps only apply where lines are collected.
    """

    max_lines: int = DEFAULT_MAX_LINES
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    report_level: str = "normal"

    def __post_init__(self):
        if self.max_lines < 1:
            raise ValueError(f"max_lines must be positive, got {self.max_lines}")
        # One slot is reserved, as in a C buffer with its terminator
        if self.max_line_length < 2:
            raise ValueError(
                f"max_line_length must be at least 2, got {self.max_line_length}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
