"""
API module for text alignment.
Provides the pure ``align`` function and a high-level wrapper for hosts.
"""

from typing import Any, List, Optional, Sequence, TextIO
import logging

from .alignment import (
    AlignMode,
    AlignmentResult,
    AlignerBase,
    InvalidModeError,
    get_aligner,
)
from .config import AlignerConfig
from .output import OutputFormatter
from .reader import read_lines


def align(lines: Sequence[str], mode: Any) -> List[str]:
    """Align ``lines`` according to ``mode``.

    Args:
        lines: Ordered text lines; never modified
        mode: AlignMode, menu number (1-4) or mode name

    Returns:
        New list of aligned lines

    Raises:
        InvalidModeError: ``mode`` is not recognized
        EmptyInputError: ``lines`` is empty and ``mode`` pads
        AllocationFailure: memory ran out while building the output
    """
    return get_aligner(AlignMode.parse(mode)).align(lines)


class TextAligner:
    """Recovering wrapper around ``align``.

    An unrecognized mode never raises here: the lines are passed through
    unaligned and the condition is reported on the result. Empty input to
    a padding mode and allocation failures still propagate.
    """

    def __init__(self, config: Optional[AlignerConfig] = None):
        self.config = config or AlignerConfig()
        self.logger = logging.getLogger(__name__)

    def read(self, stream: TextIO) -> List[str]:
        """Collect lines from ``stream`` within the configured limits"""
        return read_lines(stream, self.config.max_lines, self.config.max_line_length)

    def report(self, result: AlignmentResult, original: Sequence[str]) -> str:
        """Padding summary at the configured report level"""
        summary = OutputFormatter.build_summary(result, original)
        return OutputFormatter.format_console(summary, self.config.report_level)

    def align(self, lines: Sequence[str], mode: Any) -> AlignmentResult:
        warnings = []
        fell_back = False
        try:
            resolved = AlignMode.parse(mode)
        except InvalidModeError as e:
            self.logger.warning(f"{e}; leaving lines unaligned")
            warnings.append(str(e))
            resolved = AlignMode.LEFT
            fell_back = True

        aligned = get_aligner(resolved).align(lines)

        target_width = None
        if resolved is not AlignMode.LEFT and lines:
            target_width = AlignerBase.target_width(lines)

        return AlignmentResult(
            lines=aligned,
            mode=resolved,
            requested=mode,
            target_width=target_width,
            fell_back=fell_back,
            warnings=warnings,
        )
