"""Alignment modes

Each aligner pads every line with spaces up to the width of the longest
line in the set. Left is the identity transform.
"""

from typing import Dict, List, Sequence, Type

from .base import AlignerBase
from .models import AlignMode

PAD = " "


class LeftAligner(AlignerBase):
    """Identity transform, no padding is applied"""

    mode = AlignMode.LEFT

    @property
    def allows_empty(self) -> bool:
        return True

    def _align_lines(self, lines: Sequence[str], width: int) -> List[str]:
        return list(lines)


class RightAligner(AlignerBase):
    """Prepend spaces so every line ends at the target width"""

    mode = AlignMode.RIGHT

    def _align_lines(self, lines: Sequence[str], width: int) -> List[str]:
        return [PAD * (width - len(line)) + line for line in lines]


class CenterAligner(AlignerBase):
    """Split padding around each line; the odd space goes to the right"""

    mode = AlignMode.CENTER

    def _align_lines(self, lines: Sequence[str], width: int) -> List[str]:
        aligned = []
        for line in lines:
            deficit = width - len(line)
            left = deficit // 2
            aligned.append(PAD * left + line + PAD * (deficit - left))
        return aligned


class JustifyAligner(AlignerBase):
    """Stretch the spaces inside each line to reach the target width

    Every space character counts as a gap, so a run of consecutive spaces
    is kept verbatim and each space in it receives its share of padding.
    Earlier gaps absorb the remainder first. A line without spaces is
    padded at the end.
    """

    mode = AlignMode.JUSTIFY

    def _align_lines(self, lines: Sequence[str], width: int) -> List[str]:
        return [self.justify_line(line, width) for line in lines]

    @staticmethod
    def justify_line(line: str, width: int) -> str:
        """Justify a single line to ``width``

        Args:
            line: Line to stretch
            width: Target width

        Returns:
            The justified line; lines already at or beyond ``width`` are
            returned unchanged
        """
        if len(line) >= width:
            return line

        deficit = width - len(line)
        gaps = line.count(PAD)
        if gaps == 0:
            return line + PAD * deficit

        base_gap, extra_gaps = divmod(deficit, gaps)
        parts = []
        for char in line:
            parts.append(char)
            if char == PAD:
                spaces = base_gap
                if extra_gaps > 0:
                    spaces += 1
                    extra_gaps -= 1
                parts.append(PAD * spaces)

        justified = "".join(parts)
        # Guard: top up if the distribution fell short
        if len(justified) < width:
            justified += PAD * (width - len(justified))
        return justified


ALIGNERS: Dict[AlignMode, Type[AlignerBase]] = {
    AlignMode.LEFT: LeftAligner,
    AlignMode.RIGHT: RightAligner,
    AlignMode.CENTER: CenterAligner,
    AlignMode.JUSTIFY: JustifyAligner,
}


def get_aligner(mode: AlignMode) -> AlignerBase:
    """Instantiate the aligner registered for ``mode``"""
    return ALIGNERS[mode]()
