"""
Tests for the fixed-width text wrapper.
"""

import pytest

from moyu.chunking.fixed_width import wrap_text


class TestWrapText:
    def test_empty_text_gives_no_chunks(self):
        assert wrap_text("", 80) == []

    def test_short_text_is_one_chunk(self):
        assert wrap_text("hello", 80) == ["hello"]

    def test_exact_multiple_has_no_empty_tail(self):
        assert wrap_text("abcdef", 3) == ["abc", "def"]

    def test_last_chunk_may_be_shorter(self):
        assert wrap_text("abcdefg", 3) == ["abc", "def", "g"]

    def test_ideographs_count_as_one_character(self):
        chunks = wrap_text("一二三四五", 2)
        assert chunks == ["一二", "三四", "五"]

    @pytest.mark.parametrize("width", [1, 2, 7, 80])
    def test_concatenation_reproduces_text(self, width):
        text = "第二行内容是比较长的一段中文说明 mixed with ASCII text, 用来测试自动换行。" * 3
        chunks = wrap_text(text, width)
        assert "".join(chunks) == text
        assert all(len(c) == width for c in chunks[:-1])
        assert 0 < len(chunks[-1]) <= width

    @pytest.mark.parametrize("width", [0, -5])
    def test_non_positive_width_rejected(self, width):
        with pytest.raises(ValueError):
            wrap_text("abc", width)
