# moyu/store/bookmarks.py
"""Bookmark sidecar files.

A bookmark is the zero-based line the reader reached in a generated document.
It lives next to the *source* file as `<source><bookmark_suffix>`, e.g.
`novel.txt.bookmark`, and holds nothing but a decimal integer.

Both members of a file pair (`novel.txt` and the generated `novel.js`) map to
the same sidecar through `bookmark_path_for`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..config import ConvertOptions
from ..errors import ConversionError

logger = logging.getLogger(__name__)


def source_path_for(path: Path, options: Optional[ConvertOptions] = None) -> Path:
    """
    Map a generated target path back to its source path.

    Args:
        path: Source or target path.
        options: Naming conventions (defaults when omitted).

    Returns:
        The source path; paths that are not targets are returned unchanged.
    """
    opts = options or ConvertOptions()
    path = Path(path)
    if path.suffix.lower() == opts.target_suffix.lower():
        return path.with_suffix(opts.source_suffix)
    return path


def bookmark_path_for(path: Path, options: Optional[ConvertOptions] = None) -> Path:
    """
    Return the sidecar path for a file pair.

    Args:
        path: Either the source file or its generated target.
        options: Naming conventions (defaults when omitted).

    Returns:
        `<source path><bookmark suffix>`.
    """
    opts = options or ConvertOptions()
    source = source_path_for(path, opts)
    return source.with_name(source.name + opts.bookmark_suffix)


def load_bookmark(path: Path, options: Optional[ConvertOptions] = None) -> int:
    """
    Read the stored bookmark for a file pair.

    Args:
        path: Source or target path.
        options: Naming conventions.

    Returns:
        The stored line index, or 0 when the sidecar is missing, unreadable,
        not an integer or negative.
    """
    sidecar = bookmark_path_for(path, options)
    try:
        value = int(sidecar.read_text(encoding="utf-8").strip())
    except FileNotFoundError:
        return 0
    except (OSError, ValueError) as exc:
        logger.debug("Ignoring bookmark %s: %s", sidecar, exc)
        return 0
    if value < 0:
        logger.debug("Ignoring negative bookmark %s in %s", value, sidecar)
        return 0
    return value


def has_bookmark(path: Path, options: Optional[ConvertOptions] = None) -> bool:
    """Return True if a sidecar file exists for the pair (False when it cannot be checked)."""
    try:
        bookmark_path_for(path, options).stat()
    except OSError:
        return False
    return True


def save_bookmark(path: Path, line: int, options: Optional[ConvertOptions] = None) -> Path:
    """
    Store a bookmark, replacing any previous value.

    Args:
        path: Source or target path.
        line: Zero-based line index into the generated document.
        options: Naming conventions.

    Returns:
        Path of the sidecar file written.

    Raises:
        ValueError: If line is negative.
        ConversionError: If the sidecar cannot be written.
    """
    if line < 0:
        raise ValueError(f"Bookmark line must be >= 0, got {line}")
    sidecar = bookmark_path_for(path, options)
    try:
        sidecar.write_text(str(int(line)), encoding="utf-8")
    except OSError as exc:
        raise ConversionError(f"Cannot write bookmark {sidecar}: {exc.strerror or exc}") from exc
    logger.info("Bookmark saved at line %d (%s)", line + 1, sidecar)
    return sidecar
