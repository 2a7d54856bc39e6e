"""Host adapters.

The conversion core only needs two things from whatever hosts it:
  - a way to ask the user for a source file
  - a way to show a document positioned at a given line

`Host` is that interface; `ConsoleHost` implements it on a Rich console.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.prompt import Prompt
from rich.syntax import Syntax


class Host:
    """Host interface consumed by the conversion commands."""

    def pick_source_path(self) -> Optional[Path]:
        """
        Ask the user for a text file to convert.

        Returns:
            The chosen path, or None if the user cancelled.

        Raises:
            NotImplementedError: If not implemented.
        """
        raise NotImplementedError

    def reveal(self, document: Path, line: int) -> None:
        """
        Display `document` positioned at zero-based `line`.

        Raises:
            NotImplementedError: If not implemented.
        """
        raise NotImplementedError


class ConsoleHost(Host):
    """
    Host backed by a Rich console.

    Attributes:
        console: Console used for prompts and output.
        window: Number of document lines shown by reveal().
        context: Lines shown above the revealed line.
    """

    def __init__(self, console: Optional[Console] = None, window: int = 40, context: int = 5) -> None:
        self.console = console or Console()
        self.window = max(1, int(window))
        self.context = max(0, int(context))

    def pick_source_path(self) -> Optional[Path]:
        answer = Prompt.ask("Text file to convert (blank to cancel)", default="", show_default=False, console=self.console)
        answer = answer.strip().strip('"').strip("'")
        if not answer:
            return None
        return Path(answer).expanduser()

    def reveal(self, document: Path, line: int) -> None:
        code = document.read_text(encoding="utf-8")
        total = max(1, code.count("\n"))
        target = min(max(0, line), total - 1) + 1  # Syntax uses 1-based lines
        start = max(1, target - self.context)
        end = start + self.window - 1

        self.console.print(f"[dim]{document}[/dim]")
        self.console.print(
            Syntax(
                code,
                "javascript",
                line_numbers=True,
                line_range=(start, end),
                highlight_lines={target},
                word_wrap=True,
            )
        )
