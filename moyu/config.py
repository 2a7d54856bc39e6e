"""Configuration models and path helpers.

This module centralizes:
  - Conversion defaults (encoding, method period, wrap width)
  - File naming conventions (source/target extensions, bookmark suffix)
  - Loading per-folder overrides from `.moyu/settings.json`

Terminology:
  - Source: the text file being disguised (`*.txt`).
  - Target: the generated fake code written next to it (`*.js`).
  - Bookmark: a line offset into the target, stored in a sidecar file.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet


DEFAULT_ENCODING = "gbk"
DEFAULT_METHOD_PERIOD = 15
DEFAULT_WRAP_WIDTH = 80
DEFAULT_SOURCE_EXT = "txt"
DEFAULT_TARGET_EXT = "js"
DEFAULT_BOOKMARK_SUFFIX = ".bookmark"

DEFAULT_SETTINGS_FILE = Path(".moyu") / "settings.json"


@dataclass
class ConvertOptions:
    """Options for one conversion run.

    Attributes:
        encoding: Codec used to decode the source bytes.
        method_period: A new fake method starts every this many source lines.
        wrap_width: Maximum characters per generated comment line.
        source_ext: Extension of source files (without dot).
        target_ext: Extension of generated files (without dot).
        bookmark_suffix: Suffix appended to the source path for the sidecar.
        strict_close: Skip the trailing `return result;` when no method was opened.
        from_settings: Names of the fields set by a settings file.
    """

    encoding: str = DEFAULT_ENCODING
    method_period: int = DEFAULT_METHOD_PERIOD
    wrap_width: int = DEFAULT_WRAP_WIDTH
    source_ext: str = DEFAULT_SOURCE_EXT
    target_ext: str = DEFAULT_TARGET_EXT
    bookmark_suffix: str = DEFAULT_BOOKMARK_SUFFIX
    strict_close: bool = False
    from_settings: FrozenSet[str] = field(default=frozenset(), compare=False, repr=False)

    @property
    def source_suffix(self) -> str:
        return "." + self.source_ext.lstrip(".")

    @property
    def target_suffix(self) -> str:
        return "." + self.target_ext.lstrip(".")


def load_convert_options(root: Path) -> ConvertOptions:
    """Load conversion options from .moyu/settings.json if present.

    Args:
        root: Folder that may contain a `.moyu/settings.json` file.

    Returns:
        ConvertOptions with defaults overridden by any settings file values.
    """
    opts = ConvertOptions()
    settings_path = root / DEFAULT_SETTINGS_FILE
    try:
        payload = json.loads(settings_path.read_text(encoding="utf-8"))
    except Exception:
        return opts

    overridden = set()
    if isinstance(payload, dict):
        for key in ("encoding", "source_ext", "target_ext", "bookmark_suffix"):
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                setattr(opts, key, value.strip())
                overridden.add(key)

        period = payload.get("method_period")
        if isinstance(period, int) and not isinstance(period, bool) and period > 0:
            opts.method_period = period
            overridden.add("method_period")

        width = payload.get("wrap_width")
        if isinstance(width, int) and not isinstance(width, bool) and width > 0:
            opts.wrap_width = width
            overridden.add("wrap_width")

        if isinstance(payload.get("strict_close"), bool):
            opts.strict_close = payload["strict_close"]
            overridden.add("strict_close")

    opts.from_settings = frozenset(overridden)
    return opts
