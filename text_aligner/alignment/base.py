"""Base aligner interface

Defines the unified interface for all alignment modes.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence
import logging

from .models import AlignMode, AllocationFailure, EmptyInputError


class AlignerBase(ABC):
    """Aligner base class

    All alignment modes should inherit from this class and implement
    ``_align_lines()``.

    Responsibilities:
    - Validate input lines
    - Compute the shared target width
    - Turn memory exhaustion into a recoverable AllocationFailure
    - Handle logging
    """

    mode: AlignMode

    def __init__(self):
        self.logger = logging.getLogger(f"text_aligner.{self.__class__.__name__}")

    def align(self, lines: Sequence[str]) -> List[str]:
        """Perform alignment

        Args:
            lines: Ordered text lines. The sequence is not modified.

        Returns:
            New list of aligned lines, same length and order as the input

        Raises:
            TypeError: an element is not a string
            EmptyInputError: no lines given to a padding mode
            AllocationFailure: memory ran out while building the output
        """
        self.validate(lines)
        if not lines:
            if self.allows_empty:
                return []
            raise EmptyInputError(self.mode)

        width = self.target_width(lines)
        try:
            aligned = self._align_lines(lines, width)
        except MemoryError as e:
            raise AllocationFailure(
                f"Failed to allocate aligned output for {len(lines)} lines"
            ) from e

        self.logger.debug(
            f"{self.mode.name}: aligned {len(aligned)} lines to width {width}"
        )
        return aligned

    @property
    def allows_empty(self) -> bool:
        """Whether an empty line set is a valid input"""
        return False

    @staticmethod
    def validate(lines: Sequence[str]) -> None:
        for i, line in enumerate(lines):
            if not isinstance(line, str):
                raise TypeError(
                    f"line {i} must be str, not {type(line).__name__}"
                )

    @staticmethod
    def target_width(lines: Sequence[str]) -> int:
        """Length of the longest line, in characters"""
        return max(len(line) for line in lines)

    @abstractmethod
    def _align_lines(self, lines: Sequence[str], width: int) -> List[str]:
        """Pad every line of a non-empty set to ``width``"""
        raise NotImplementedError
