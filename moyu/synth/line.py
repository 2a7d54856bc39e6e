"""Turn one line of prose into one line of plausible-looking code."""

from __future__ import annotations

import random
import re
from typing import List, Optional

from .templates import DEFAULT_TEMPLATES, NOOP_STATEMENT, TemplateTables

_IDEOGRAPH_RE = re.compile("[\u4e00-\u9fa5]")


def extract_ideographs(line: str) -> List[str]:
    """Return the CJK ideographs of `line` in order of appearance."""
    return _IDEOGRAPH_RE.findall(line)


def synthesize_line(
    line: str,
    rng: Optional[random.Random] = None,
    templates: TemplateTables = DEFAULT_TEMPLATES,
) -> str:
    """
    Render a random statement that borrows identifiers from `line`.

    The first ideograph becomes the primary identifier and the second (when
    present) the secondary one. Identifiers are inserted verbatim; the result
    is only meant to look like code.

    Args:
        line: Trimmed source line.
        rng: Random source; a fresh unseeded one when omitted.
        templates: Template tables to draw statement patterns from.

    Returns:
        Statement text, or `continue;` when the line has no ideographs.
    """
    words = extract_ideographs(line)
    if not words:
        return NOOP_STATEMENT

    rng = rng or random.Random()
    primary = words[0]
    secondary = words[1] if len(words) > 1 else None
    pattern = templates.pick(rng, templates.statements)
    return pattern.render(primary, secondary)
