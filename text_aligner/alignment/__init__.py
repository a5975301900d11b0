"""Alignment module

Unified alignment mode interface and implementations.
"""

from .models import (
    AlignMode,
    AlignmentResult,
    AlignmentError,
    InvalidModeError,
    EmptyInputError,
    AllocationFailure,
)
from .base import AlignerBase
from .aligners import (
    LeftAligner,
    RightAligner,
    CenterAligner,
    JustifyAligner,
    ALIGNERS,
    get_aligner,
)

__all__ = [
    "AlignMode",
    "AlignmentResult",
    "AlignmentError",
    "InvalidModeError",
    "EmptyInputError",
    "AllocationFailure",
    "AlignerBase",
    "LeftAligner",
    "RightAligner",
    "CenterAligner",
    "JustifyAligner",
    "ALIGNERS",
    "get_aligner",
]
