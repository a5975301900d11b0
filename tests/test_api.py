"""align() 与 TextAligner 测试"""

import io

import pytest

from text_aligner import (
    align,
    TextAligner,
    AlignerConfig,
    AlignMode,
    AlignmentResult,
    InvalidModeError,
    EmptyInputError,
)


# 模式解析
@pytest.mark.parametrize(
    "value, expected",
    [
        (AlignMode.CENTER, AlignMode.CENTER),
        (1, AlignMode.LEFT),
        (4, AlignMode.JUSTIFY),
        ("2", AlignMode.RIGHT),
        (" 3 ", AlignMode.CENTER),
        ("justify", AlignMode.JUSTIFY),
        ("Right", AlignMode.RIGHT),
    ],
)
def test_mode_parse(value, expected):
    assert AlignMode.parse(value) is expected


@pytest.mark.parametrize(
    "value", [0, 5, -1, "7", "middle", "", None, 2.0, True, "²"]
)
def test_mode_parse_rejects_unknown(value):
    with pytest.raises(InvalidModeError):
        AlignMode.parse(value)


def test_mode_labels():
    assert [m.label for m in AlignMode] == [
        "Left Align",
        "Right Align",
        "Center Align",
        "Justify",
    ]


# align() 函数契约
def test_align_scenarios():
    """基本场景"""
    assert align(["cat", "elephant"], AlignMode.RIGHT) == ["     cat", "elephant"]
    assert align(["cat", "elephant"], "center") == ["  cat   ", "elephant"]
    assert align(["a b c", "elephant"], 4) == ["a   b  c", "elephant"]
    assert align(["solo"], AlignMode.JUSTIFY) == ["solo"]


def test_align_left_identity_on_empty():
    assert align([], AlignMode.LEFT) == []


def test_align_empty_input_raises():
    with pytest.raises(EmptyInputError):
        align([], AlignMode.RIGHT)


def test_align_invalid_mode_raises():
    with pytest.raises(InvalidModeError) as excinfo:
        align(["a"], 9)
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("mode", list(AlignMode))
def test_align_preserves_order_and_count(mode, sample_lines):
    aligned = align(sample_lines, mode)
    assert len(aligned) == len(sample_lines)
    for original, line in zip(sample_lines, aligned):
        assert line.split() == original.split()


# TextAligner 回退行为
def test_text_aligner_result(aligner):
    result = aligner.align(["cat", "elephant"], "2")
    assert isinstance(result, AlignmentResult)
    assert result.mode is AlignMode.RIGHT
    assert result.lines == ["     cat", "elephant"]
    assert result.target_width == 8
    assert not result.fell_back
    assert result.warnings == []


def test_text_aligner_invalid_mode_falls_back_to_left(aligner, sample_lines):
    """无效模式回退为左对齐并报告"""
    result = aligner.align(sample_lines, "9")
    assert result.mode is AlignMode.LEFT
    assert result.lines == sample_lines
    assert result.fell_back
    assert result.warnings == ["Invalid choice: '9'"]
    assert result.target_width is None


def test_text_aligner_empty_input_propagates(aligner):
    with pytest.raises(EmptyInputError):
        aligner.align([], AlignMode.CENTER)


def test_text_aligner_invalid_mode_with_empty_input(aligner):
    result = aligner.align([], "x")
    assert result.lines == []
    assert result.fell_back


def test_result_to_dict(aligner):
    data = aligner.align(["ab", "abcd"], AlignMode.CENTER).to_dict()
    assert data == {
        "lines": [" ab ", "abcd"],
        "mode": "center",
        "requested": "center",
        "target_width": 4,
        "fell_back": False,
        "warnings": [],
    }


@pytest.mark.parametrize("value", ["9", "²"])
def test_invalid_mode_warning_keeps_raw_value(aligner, value):
    """警告中保留调用方传入的原始值"""
    result = aligner.align(["a", "bb"], value)
    assert result.lines == ["a", "bb"]
    assert result.fell_back
    assert result.warnings == [f"Invalid choice: {value!r}"]


def test_text_aligner_read_uses_config_limits(small_config):
    """读取时应用配置中的行数和行长限制"""
    lines = TextAligner(small_config).read(io.StringIO("abcdefghij\nb\nc\nd\n"))
    assert lines == ["abcdefg", "b", "c"]


def test_text_aligner_report_uses_config_level():
    aligner = TextAligner(AlignerConfig(report_level="minimal"))
    original = ["cat", "elephant"]
    result = aligner.align(original, "right")
    assert aligner.report(result, original) == "[OK] right: 2 lines, 5 spaces added"
