"""
Text Aligner: left, right, center and justify alignment for batches of text lines.
"""

import logging

from .api import TextAligner, align
from .config import AlignerConfig

# Alignment module
from . import alignment
from .alignment import (
    AlignMode,
    AlignmentResult,
    AlignerBase,
    LeftAligner,
    RightAligner,
    CenterAligner,
    JustifyAligner,
    AlignmentError,
    InvalidModeError,
    EmptyInputError,
    AllocationFailure,
)

# Output module
from . import output
from .output import OutputFormatter, padding_statistics

__version__ = "0.1.0"
__all__ = [
    "TextAligner",
    "align",
    "AlignerConfig",
    "AlignMode",
    "AlignmentResult",
    "AlignerBase",
    "LeftAligner",
    "RightAligner",
    "CenterAligner",
    "JustifyAligner",
    "AlignmentError",
    "InvalidModeError",
    "EmptyInputError",
    "AllocationFailure",
    "OutputFormatter",
    "padding_statistics",
    "alignment",
    "output",
]

# Configure default logging format to be minimal
_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(message)s"))
_logger = logging.getLogger("text_aligner")
_logger.addHandler(_handler)
_logger.setLevel(logging.INFO)
