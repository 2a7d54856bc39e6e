"""
Tests for the conversion pipeline and host-driven conversion.
"""

import random
from pathlib import Path

import pytest
from rich.console import Console

from moyu.cli_actions import run_conversion
from moyu.config import ConvertOptions
from moyu.convert import convert_file, convert_text, target_path_for, write_text_atomic
from moyu.errors import ConversionError
from moyu.store import save_bookmark
from moyu.ui.host import ConsoleHost, Host


class RecordingHost(Host):
    """Host that returns a fixed path and records reveal() calls."""

    def __init__(self, path=None):
        self.path = path
        self.revealed = []

    def pick_source_path(self):
        return self.path

    def reveal(self, document, line):
        self.revealed.append((document, line))


# --------------------------------------------------------------------------- #
# Pipeline
# --------------------------------------------------------------------------- #

class TestTargetPath:
    def test_replaces_suffix(self):
        assert target_path_for(Path("/books/novel.txt")) == Path("/books/novel.js")

    def test_only_last_suffix(self):
        assert target_path_for(Path("/books/a.txt.backup.txt")) == Path("/books/a.txt.backup.js")


class TestConvertFile:
    def test_writes_utf8_target(self, gbk_file):
        src = gbk_file("第一行测试\n\n第二行内容\n")
        result = convert_file(src, rng=random.Random(1))

        assert result.target == src.with_suffix(".js")
        code = result.target.read_text(encoding="utf-8")
        assert "    // 第一行测试" in code
        assert "    // 第二行内容" in code
        assert result.line_count == code.count("\n")
        assert result.bookmark == 0

    def test_reports_stored_bookmark(self, gbk_file):
        src = gbk_file("第一行\n")
        convert_file(src, rng=random.Random(1))
        save_bookmark(src.with_suffix(".js"), 7)

        again = convert_file(src, rng=random.Random(2))
        assert again.bookmark == 7

    def test_crlf_source(self, gbk_file):
        src = gbk_file("第一行\r\n第二行\r\n")
        code = convert_file(src, rng=random.Random(1)).target.read_text(encoding="utf-8")
        assert "\r" not in code

    def test_missing_source(self, tmp_path):
        with pytest.raises(ConversionError):
            convert_file(tmp_path / "missing.txt")
        assert not (tmp_path / "missing.js").exists()

    def test_unknown_encoding_leaves_no_output(self, gbk_file):
        src = gbk_file("第一行\n")
        with pytest.raises(ConversionError):
            convert_file(src, ConvertOptions(encoding="no-such-codec"))
        assert not src.with_suffix(".js").exists()

    def test_refuses_to_overwrite_source(self, tmp_path):
        src = tmp_path / "code.js"
        src.write_text("x", encoding="utf-8")
        with pytest.raises(ConversionError):
            convert_file(src)
        assert src.read_text(encoding="utf-8") == "x"

    def test_rejects_other_suffixes(self, gbk_file, tmp_path):
        src = gbk_file("第一行\n", name="novel.md")
        with pytest.raises(ConversionError):
            convert_file(src)
        assert not (tmp_path / "novel.js").exists()

    def test_does_not_clobber_existing_js(self, tmp_path):
        src = tmp_path / "app.py"
        src.write_text("print(1)\n", encoding="utf-8")
        existing = tmp_path / "app.js"
        existing.write_text("export default 1;\n", encoding="utf-8")
        with pytest.raises(ConversionError):
            convert_file(src)
        assert existing.read_text(encoding="utf-8") == "export default 1;\n"

    def test_custom_source_ext_keeps_bookmark(self, tmp_path):
        opts = ConvertOptions(source_ext="log", encoding="utf-8")
        src = tmp_path / "run.log"
        src.write_text("第一行\n", encoding="utf-8")
        convert_file(src, opts, rng=random.Random(1))
        save_bookmark(src.with_suffix(".js"), 5, opts)
        assert convert_file(src, opts, rng=random.Random(2)).bookmark == 5

    def test_no_temp_files_left(self, gbk_file):
        src = gbk_file("第一行\n")
        convert_file(src)
        assert sorted(p.name for p in src.parent.iterdir()) == ["novel.js", "novel.txt"]


class TestConvertText:
    def test_uses_options(self):
        code = convert_text("a" * 30, ConvertOptions(wrap_width=10), rng=random.Random(0))
        assert code.count("    // aaaaaaaaaa") == 3


class TestWriteTextAtomic:
    def test_replaces_existing(self, tmp_path):
        p = tmp_path / "out.js"
        p.write_text("old", encoding="utf-8")
        write_text_atomic(p, "new")
        assert p.read_text(encoding="utf-8") == "new"

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConversionError):
            write_text_atomic(tmp_path / "nope" / "out.js", "x")


# --------------------------------------------------------------------------- #
# Host-driven conversion
# --------------------------------------------------------------------------- #

class TestRunConversion:
    def test_cancelled_pick(self):
        host = RecordingHost(path=None)
        assert run_conversion(host) is None
        assert host.revealed == []

    def test_picked_path_is_converted_and_revealed(self, gbk_file):
        src = gbk_file("第一行\n")
        save_bookmark(src, 4)
        host = RecordingHost(path=src)

        result = run_conversion(host, rng=random.Random(1))
        assert result is not None
        assert host.revealed == [(result.target, 4)]

    def test_reveal_can_be_skipped(self, gbk_file):
        src = gbk_file("第一行\n")
        host = RecordingHost()
        run_conversion(host, path=src, reveal=False)
        assert host.revealed == []

    def test_folder_settings_apply(self, gbk_file):
        src = gbk_file("第一行\n")
        (src.parent / ".moyu").mkdir()
        (src.parent / ".moyu" / "settings.json").write_text('{"target_ext": "ts"}', encoding="utf-8")
        result = run_conversion(RecordingHost(), path=src, reveal=False)
        assert result.target == src.with_suffix(".ts")


class TestConsoleHost:
    def test_base_host_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Host().pick_source_path()
        with pytest.raises(NotImplementedError):
            Host().reveal(Path("x.js"), 0)

    def test_reveal_shows_window_around_line(self, tmp_path):
        doc = tmp_path / "doc.js"
        doc.write_text("".join(f"row_{i}\n" for i in range(1, 101)), encoding="utf-8")
        console = Console(record=True, width=100)

        ConsoleHost(console=console, window=10, context=2).reveal(doc, 49)
        text = console.export_text()
        assert "row_48" in text
        assert "row_50" in text
        assert "row_57" in text
        assert "row_47" not in text
        assert "row_58" not in text

    def test_reveal_clamps_past_end(self, tmp_path):
        doc = tmp_path / "doc.js"
        doc.write_text("only_line\n", encoding="utf-8")
        console = Console(record=True, width=100)
        ConsoleHost(console=console).reveal(doc, 500)
        assert "only_line" in console.export_text()
