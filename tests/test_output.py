"""输出格式化与填充统计测试"""

import pytest

from text_aligner import AlignMode, OutputFormatter, padding_statistics


def test_format_lines():
    assert OutputFormatter.format_lines(["  a", "bcd"]) == "  a\nbcd\n"
    assert OutputFormatter.format_lines([]) == ""


def test_padding_statistics():
    stats = padding_statistics(["cat", "elephant"], ["     cat", "elephant"])
    assert stats["per_line"] == [5, 0]
    assert stats["total"] == 5
    assert stats["mean"] == pytest.approx(2.5)
    assert stats["stdev"] == pytest.approx(2.5)
    assert stats["min"] == 0
    assert stats["max"] == 5
    assert stats["untouched"] == 1


def test_padding_statistics_empty():
    stats = padding_statistics([], [])
    assert stats["total"] == 0
    assert stats["per_line"] == []


def test_padding_statistics_count_mismatch():
    with pytest.raises(ValueError):
        padding_statistics(["a"], [])


def test_build_summary(aligner):
    original = ["cat", "elephant"]
    result = aligner.align(original, AlignMode.CENTER)
    summary = OutputFormatter.build_summary(result, original)
    assert summary["mode"] == "center"
    assert summary["line_count"] == 2
    assert summary["target_width"] == 8
    assert summary["padding"]["total"] == 5
    assert not summary["fell_back"]


def test_format_console_levels(aligner):
    original = ["a b c", "elephant"]
    result = aligner.align(original, "justify")
    summary = OutputFormatter.build_summary(result, original)

    minimal = OutputFormatter.format_console(summary, "minimal")
    assert minimal == "[OK] justify: 2 lines, 3 spaces added"

    normal = OutputFormatter.format_console(summary, "normal")
    assert "Target width:  8" in normal
    assert "line   1" not in normal

    verbose = OutputFormatter.format_console(summary, "verbose")
    assert "line   1: +3" in verbose
    assert "line   2: +0" in verbose


def test_format_console_unknown_level_uses_normal(aligner):
    original = ["x"]
    summary = OutputFormatter.build_summary(aligner.align(original, 1), original)
    assert OutputFormatter.format_console(
        summary, "loud"
    ) == OutputFormatter.format_console(summary, "normal")


def test_format_console_reports_fallback(aligner):
    original = ["a", "bb"]
    summary = OutputFormatter.build_summary(aligner.align(original, "9"), original)
    assert OutputFormatter.format_console(summary, "minimal").startswith("[FALLBACK]")
    normal = OutputFormatter.format_console(summary, "normal")
    assert "[WARN] Invalid choice: '9'" in normal
    assert "Target width:  -" in normal
