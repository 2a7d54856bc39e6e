"""Conversion pipeline: source file -> fake code file.

This module wires the pieces together:
  - bookmark lookup (before conversion)
  - decoding the source
  - synthesizing the document
  - writing the target atomically
"""

from __future__ import annotations

import logging
import os
import random
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import ConvertOptions
from .errors import ConversionError
from .ingest.loaders import read_source_text, split_lines
from .store.bookmarks import load_bookmark, source_path_for
from .synth.document import DocumentSynthesizer

logger = logging.getLogger(__name__)

__all__ = [
    "ConversionResult",
    "convert_file",
    "convert_text",
    "source_path_for",
    "target_path_for",
    "write_text_atomic",
]


@dataclass
class ConversionResult:
    """Outcome of converting one file.

    Attributes:
        source: Source text file.
        target: Generated fake code file.
        bookmark: Stored bookmark (zero-based line in target), 0 if none.
        line_count: Number of lines in the generated document.
    """

    source: Path
    target: Path
    bookmark: int
    line_count: int


def target_path_for(source: Path, options: Optional[ConvertOptions] = None) -> Path:
    """Return the sibling path the generated code is written to."""
    opts = options or ConvertOptions()
    return Path(source).with_suffix(opts.target_suffix)


def write_text_atomic(path: Path, text: str) -> None:
    """
    Write UTF-8 text through a temp file in the same folder, then rename.

    Raises:
        ConversionError: If the file cannot be written. No temp file is left.
    """
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            fh.write(text)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ConversionError(f"Cannot write {path}: {exc.strerror or exc}") from exc


def convert_text(
    content: str,
    options: Optional[ConvertOptions] = None,
    rng: Optional[random.Random] = None,
    bookmark: int = 0,
) -> str:
    """Synthesize fake code for already decoded text."""
    opts = options or ConvertOptions()
    synth = DocumentSynthesizer(
        rng=rng,
        method_period=opts.method_period,
        wrap_width=opts.wrap_width,
        strict_close=opts.strict_close,
    )
    return synth.synthesize(split_lines(content), bookmark)


def convert_file(
    source: Path,
    options: Optional[ConvertOptions] = None,
    rng: Optional[random.Random] = None,
) -> ConversionResult:
    """
    Convert a text file into a fake code file next to it.

    Args:
        source: Text file to convert.
        options: Conversion options.
        rng: Random source for template picks (unseeded when omitted).

    Returns:
        ConversionResult describing the written file.

    Raises:
        ConversionError: If the source does not have the source suffix, cannot
            be read, uses an unknown encoding, would be overwritten by its own
            target, or the target cannot be written.
    """
    opts = options or ConvertOptions()
    source = Path(source).expanduser().resolve()
    target = target_path_for(source, opts)
    if source.suffix != opts.source_suffix:
        # Bookmarks are keyed on the source suffix; other files would lose them
        raise ConversionError(f"Only {opts.source_suffix} files can be converted, got {source.name}")
    if target == source:
        raise ConversionError(f"Refusing to overwrite {source} with generated code")

    bookmark = load_bookmark(source, opts)
    content = read_source_text(source, opts.encoding)
    code = convert_text(content, opts, rng=rng, bookmark=bookmark)
    write_text_atomic(target, code)

    line_count = code.count("\n")
    logger.info("Converted %s -> %s (%d lines)", source.name, target.name, line_count)
    return ConversionResult(source=source, target=target, bookmark=bookmark, line_count=line_count)
