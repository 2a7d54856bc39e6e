"""Error types raised by moyu."""

from __future__ import annotations


class ConversionError(OSError):
    """A conversion could not read its source or write its output.

    Raised for unreadable source files, unknown encodings, unwritable
    targets and a target path that would overwrite its own source.
    """
