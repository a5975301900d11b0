"""对齐数据模型

包含对齐相关的枚举、结果数据结构和异常类。
"""

from dataclasses import dataclass, field
from typing import List, Optional, Any, Dict
from enum import Enum


class AlignmentError(Exception):
    """Base class for all alignment failures."""


class InvalidModeError(AlignmentError, ValueError):
    """Raised when a mode selector is outside the recognized enumeration."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid choice: {value!r}")


class EmptyInputError(AlignmentError, ValueError):
    """Raised when a padding mode receives no lines to align."""

    def __init__(self, mode: "AlignMode"):
        self.mode = mode
        super().__init__(f"{mode.label} requires at least one line")


class AllocationFailure(AlignmentError):
    """Raised when building the aligned output runs out of memory."""


class AlignMode(Enum):
    """对齐模式

    数值与交互菜单中的选项编号一致。
    """

    LEFT = 1
    RIGHT = 2
    CENTER = 3
    JUSTIFY = 4

    @property
    def label(self) -> str:
        """菜单显示名称"""
        if self is AlignMode.JUSTIFY:
            return "Justify"
        return f"{self.name.capitalize()} Align"

    @classmethod
    def parse(cls, value: Any) -> "AlignMode":
        """Resolve a selector into an AlignMode.

        Accepts an AlignMode, a menu number (int or numeric string) or a
        case-insensitive mode name.

        Raises:
            InvalidModeError: the value matches no mode
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass; True must not select LEFT
        if isinstance(value, bool):
            raise InvalidModeError(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidModeError(value) from None
        if isinstance(value, str):
            text = value.strip()
            try:
                if text.isdecimal():
                    return cls(int(text))
                return cls[text.upper()]
            except (KeyError, ValueError):
                raise InvalidModeError(value) from None
        raise InvalidModeError(value)


@dataclass
class AlignmentResult:
    """对齐结果

    记录实际应用的模式、调用方请求的原始模式以及回退产生的警告。
    """

    lines: List[str]
    mode: AlignMode
    requested: Any = None
    target_width: Optional[int] = None
    fell_back: bool = False  # unrecognized mode degraded to Left
    warnings: List[str] = field(default_factory=list)

    @property
    def requested_label(self) -> Optional[str]:
        """Requested mode as text, mode names for AlignMode values"""
        if self.requested is None:
            return None
        if isinstance(self.requested, AlignMode):
            return self.requested.name.lower()
        return str(self.requested)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "lines": list(self.lines),
            "mode": self.mode.name.lower(),
            "requested": self.requested_label,
            "target_width": self.target_width,
            "fell_back": self.fell_back,
            "warnings": list(self.warnings),
        }

    def __repr__(self):
        return (
            f"AlignmentResult(mode={self.mode.name}, lines={self.line_count}, "
            f"width={self.target_width})"
        )
