# moyu/synth/document.py
"""Document synthesizer.

Builds a fake JavaScript class around the lines of a text file:

    /** header */
    import ...;

    class DataProcessor {
      private readonly data;

      private async processData() {
        const result = { status: true, data: {} };
        // <original line, wrapped>
        <statement derived from the line>
        return result;
      }
    }

A new method starts every `method_period` source lines (empty lines count
towards the period but produce no output).
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..chunking.fixed_width import wrap_text
from .line import synthesize_line
from .templates import (
    DEFAULT_TEMPLATES,
    FILE_HEADER,
    IMPORT_LINES,
    METHOD_NAME_SUFFIX,
    RESULT_INIT,
    RETURN_STATEMENT,
    TemplateTables,
)

INDENT = "  "
_NON_LATIN_RE = re.compile(r"[^a-zA-Z]")


@dataclass
class ConversionState:
    """Mutable state of a single synthesize() call."""

    parts: List[str] = field(default_factory=list)
    indent_level: int = 0
    method_count: int = 0
    method_open: bool = False

    def emit(self, text: str = "", extra_indent: int = 0) -> None:
        """Append one output line at the current indentation (blank when empty)."""
        if text:
            self.parts.append(INDENT * (self.indent_level + extra_indent) + text + "\n")
        else:
            self.parts.append("\n")

    def render(self) -> str:
        return "".join(self.parts)


def method_name_for(line: str) -> str:
    """Derive a method name from the first two characters of a line."""
    return _NON_LATIN_RE.sub("", line[:2]) + METHOD_NAME_SUFFIX


class DocumentSynthesizer:
    """
    Turns source lines into fake code.

    Attributes:
        rng: Random source for every template pick.
        templates: Template tables.
        method_period: Source lines per fake method.
        wrap_width: Maximum characters per comment line.
        strict_close: When True, the trailing method close is only emitted if a
            method was opened. When False (default) an input without any
            non-empty line still ends with `return result;` and `}`.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        templates: TemplateTables = DEFAULT_TEMPLATES,
        method_period: int = 15,
        wrap_width: int = 80,
        strict_close: bool = False,
    ) -> None:
        if method_period <= 0:
            raise ValueError(f"method_period must be positive, got {method_period}")
        if wrap_width <= 0:
            raise ValueError(f"wrap_width must be positive, got {wrap_width}")
        self.rng = rng or random.Random()
        self.templates = templates
        self.method_period = method_period
        self.wrap_width = wrap_width
        self.strict_close = strict_close

    def synthesize(self, source: Sequence[str], bookmark: int = 0) -> str:
        """
        Produce the fake code for `source`.

        Args:
            source: Source lines in original order.
            bookmark: Line the caller will reveal afterwards. It does not
                influence the generated text.

        Returns:
            The generated document, newline terminated.
        """
        state = ConversionState()
        self._open_document(state)

        for i, raw in enumerate(source):
            line = raw.strip()
            if not line:
                continue

            if i % self.method_period == 0 or not state.method_open:
                if state.method_open:
                    self._close_method(state)
                    state.emit()
                self._open_method(state, line)

            for fragment in wrap_text(line, self.wrap_width):
                state.emit("// " + fragment, extra_indent=1)
            state.emit(synthesize_line(line, self.rng, self.templates), extra_indent=1)

        if state.method_count > 0 or not self.strict_close:
            self._close_method(state)

        state.indent_level -= 1
        state.emit("}")
        return state.render()

    def _open_document(self, state: ConversionState) -> None:
        state.parts.append(FILE_HEADER)
        for line in IMPORT_LINES:
            state.emit(line)
        state.emit()

        state.emit(self.templates.pick(self.rng, self.templates.class_openings))
        state.indent_level += 1

        state.emit(self.templates.pick(self.rng, self.templates.fields) + ";")
        state.emit()

    def _open_method(self, state: ConversionState, line: str) -> None:
        prefix = self.templates.pick(self.rng, self.templates.method_prefixes)
        state.emit(f"{prefix}{method_name_for(line)}() {{")
        state.emit(RESULT_INIT, extra_indent=1)
        state.method_count += 1
        state.method_open = True

    def _close_method(self, state: ConversionState) -> None:
        state.emit(RETURN_STATEMENT, extra_indent=1)
        state.emit("}")
        state.method_open = False


def synthesize_document(
    source: Sequence[str],
    bookmark: int = 0,
    rng: Optional[random.Random] = None,
    **kwargs,
) -> str:
    """Convenience wrapper around DocumentSynthesizer(...).synthesize()."""
    return DocumentSynthesizer(rng=rng, **kwargs).synthesize(source, bookmark)
