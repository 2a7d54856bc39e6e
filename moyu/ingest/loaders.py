"""Source loading utilities.

Source files are plain text saved in a legacy East Asian encoding. This module
includes:
  - lenient decoding (malformed sequences become U+FFFD)
  - safe reads that surface failures as ConversionError
  - splitting decoded text into source lines
"""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Tuple

from ..errors import ConversionError


def decode_bytes(raw: bytes, encoding: str) -> str:
    """Decode raw bytes with a named codec, replacing malformed sequences.

    Args:
        raw: Bytes read from disk.
        encoding: Codec name, e.g. "gbk" or "gb18030".

    Returns:
        Decoded text.

    Raises:
        ConversionError: If the codec name is unknown.
    """
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConversionError(f"Unknown encoding: {encoding}") from exc
    return raw.decode(encoding, errors="replace")


def split_lines(content: str) -> Tuple[str, ...]:
    """Split decoded content on newlines (carriage returns are left to trimming)."""
    return tuple(content.split("\n"))


def read_source_text(path: Path, encoding: str) -> str:
    """Read and decode a source file.

    Args:
        path: Source file path.
        encoding: Codec name.

    Returns:
        Decoded file content.

    Raises:
        ConversionError: If the file cannot be read or the encoding is unknown.
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConversionError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    return decode_bytes(raw, encoding)
