"""Unified output formatting for aligned lines and console reports"""

from typing import Dict, Any, Sequence

from ..alignment import AlignmentResult
from .stats import padding_statistics


class OutputFormatter:
    """Formats alignment results into output records and console reports"""

    # Output levels
    OUTPUT_LEVELS = {"minimal", "normal", "verbose"}
    DEFAULT_LEVEL = "normal"

    @staticmethod
    def format_lines(lines: Sequence[str]) -> str:
        """One output record per line, order preserved"""
        if not lines:
            return ""
        return "\n".join(lines) + "\n"

    @staticmethod
    def build_summary(
        result: AlignmentResult, original: Sequence[str]
    ) -> Dict[str, Any]:
        """Build summary layer from an alignment result

        Args:
            result: Result returned by TextAligner.align
            original: Lines as they were before alignment

        Returns:
            Structured summary dict with mode, width and padding statistics
        """
        return {
            "mode": result.mode.name.lower(),
            "requested": result.requested_label,
            "line_count": result.line_count,
            "target_width": result.target_width,
            "fell_back": result.fell_back,
            "warnings": list(result.warnings),
            "padding": padding_statistics(original, result.lines),
        }

    @staticmethod
    def format_console(summary: Dict[str, Any], level: str = "normal") -> str:
        """Format summary as console output

        Args:
            summary: Summary dict from build_summary
            level: Output level (minimal, normal, verbose)

        Returns:
            Formatted console output string
        """
        if level not in OutputFormatter.OUTPUT_LEVELS:
            level = OutputFormatter.DEFAULT_LEVEL

        if level == "minimal":
            return OutputFormatter._format_minimal(summary)
        elif level == "normal":
            return OutputFormatter._format_normal(summary)
        else:  # verbose
            return OutputFormatter._format_verbose(summary)

    @staticmethod
    def _format_minimal(summary: Dict[str, Any]) -> str:
        """Minimal console output - one line"""
        padding = summary.get("padding", {})
        status = "FALLBACK" if summary.get("fell_back") else "OK"
        return (
            f"[{status}] {summary.get('mode', 'left')}: "
            f"{summary.get('line_count', 0)} lines, "
            f"{padding.get('total', 0)} spaces added"
        )

    @staticmethod
    def _format_normal(summary: Dict[str, Any]) -> str:
        """Normal console output - compact summary"""
        padding = summary.get("padding", {})
        width = summary.get("target_width")
        lines = [
            "=" * 40,
            f"Mode:          {summary.get('mode', 'left')}",
            f"Lines:         {summary.get('line_count', 0)}",
            f"Target width:  {'-' if width is None else width}",
            f"Spaces added:  {padding.get('total', 0)} "
            f"(mean {padding.get('mean', 0.0):.2f}, max {padding.get('max', 0)})",
            f"Untouched:     {padding.get('untouched', 0)}",
        ]
        for warning in summary.get("warnings", []):
            lines.append(f"[WARN] {warning}")
        lines.append("=" * 40)
        return "\n".join(lines)

    @staticmethod
    def _format_verbose(summary: Dict[str, Any]) -> str:
        """Verbose console output - normal summary plus per-line padding"""
        padding = summary.get("padding", {})
        lines = [OutputFormatter._format_normal(summary)]
        lines.append(f"Padding stdev: {padding.get('stdev', 0.0):.4f}")
        for i, added in enumerate(padding.get("per_line", []), 1):
            lines.append(f"  line {i:>3}: +{added}")
        return "\n".join(lines)
