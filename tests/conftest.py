"""Pytest 配置和 fixtures

定义所有测试共享的 fixtures。
"""

import pytest

from text_aligner import TextAligner, AlignerConfig


@pytest.fixture
def sample_lines():
    """长度各不相同的示例行"""
    return ["a b c", "elephant", "hi there", "x", ""]


@pytest.fixture
def aligner():
    """默认配置的对齐器"""
    return TextAligner()


@pytest.fixture
def small_config():
    """较小的读取限制"""
    return AlignerConfig(max_lines=3, max_line_length=8)
