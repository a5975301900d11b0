"""Interactive input collection

Collects lines until a blank line, end of input or the line cap, and
prompts for the alignment mode.
"""

from typing import List, TextIO
import logging

from .alignment import AlignMode
from .config import DEFAULT_MAX_LINES, DEFAULT_MAX_LINE_LENGTH

logger = logging.getLogger(__name__)

LINES_PROMPT = "Enter lines of text. To stop, enter a blank line."


def read_lines(
    stream: TextIO,
    max_lines: int = DEFAULT_MAX_LINES,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> List[str]:
    """Read lines from ``stream``.

    Reading stops at the first blank line, at end of input, or once
    ``max_lines`` lines are collected. Lines longer than
    ``max_line_length - 1`` characters are truncated.

    Args:
        stream: Text stream to read from
        max_lines: Maximum number of lines to collect
        max_line_length: Line buffer size; one slot is reserved

    Returns:
        Collected lines without their line terminators
    """
    limit = max_line_length - 1
    lines = []
    while len(lines) < max_lines:
        raw = stream.readline()
        if not raw:
            break
        line = raw.rstrip("\r\n")
        if not line:
            break
        if len(line) > limit:
            logger.warning(
                f"Line {len(lines) + 1} truncated from {len(line)} to {limit} characters"
            )
            line = line[:limit]
        lines.append(line)

    if len(lines) == max_lines:
        logger.debug(f"Line cap of {max_lines} reached")
    return lines


def format_menu() -> str:
    """Render the alignment choice menu"""
    menu = ["", "Choose alignment:"]
    for mode in AlignMode:
        menu.append(f"{mode.value}. {mode.label}")
    return "\n".join(menu) + "\n"


def prompt_mode(stream: TextIO, out: TextIO) -> str:
    """Print the menu to ``out`` and read one answer from ``stream``.

    Returns:
        The raw answer with surrounding whitespace removed; empty at end of input
    """
    out.write(format_menu())
    out.write(f"Enter choice (1-{len(AlignMode)}): ")
    out.flush()
    return stream.readline().strip()
