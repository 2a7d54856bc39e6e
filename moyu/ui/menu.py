"""Interactive terminal menu (wizard).

Concepts:
  - Source: the text file you are reading.
  - Output: the fake .js file generated next to it.
  - Bookmark: the output line you stopped at; restored on the next convert.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt

from ..cli_actions import do_bookmark, do_bookmark_status, do_convert
from .host import ConsoleHost


console = Console()


@dataclass
class MenuState:
    """In-memory session configuration for the wizard."""

    source_path: Optional[str] = None
    encoding: Optional[str] = None  # None: folder settings, then gbk
    show: bool = True


def _header(state: MenuState) -> None:
    console.print("")
    console.print("[bold cyan]Moyu[/bold cyan]: text files dressed up as code")
    if state.source_path:
        console.print(f"[bold]Current file:[/bold] {state.source_path}")
    else:
        console.print("[dim]No file converted yet.[/dim]")
    console.print(f"[dim]Encoding:[/dim] {state.encoding or 'from settings'}")


def _require_source(state: MenuState, action: str) -> bool:
    """Ensure a file is selected before running an action."""
    if state.source_path:
        return True
    console.print(f"[yellow]Convert a file first to {action}.[/yellow]")
    return False


def run_menu() -> None:
    """Run the interactive menu."""
    state = MenuState()
    host = ConsoleHost(console=console)

    while True:
        _header(state)

        console.print("\n[bold]Main Menu[/bold]")
        console.print("1) Convert a text file")
        console.print("2) Re-convert current file")
        console.print("3) Bookmark a line")
        console.print("4) Show bookmark")
        console.print("5) Settings")
        console.print("0) Exit")

        choice = Prompt.ask("Select", default="1")

        if choice == "1":
            picked = host.pick_source_path()
            if picked is None:
                continue
            state.source_path = str(picked)
            do_convert(path=state.source_path, encoding=state.encoding, show=state.show, host=host)
            continue

        if choice == "2":
            if not _require_source(state, "re-convert it"):
                continue
            do_convert(path=state.source_path, encoding=state.encoding, show=state.show, host=host)
            continue

        if choice == "3":
            if not _require_source(state, "bookmark it"):
                continue
            line = IntPrompt.ask("Line number in the generated file", default=1)
            do_bookmark(state.source_path, line)
            continue

        if choice == "4":
            if not _require_source(state, "show its bookmark"):
                continue
            do_bookmark_status(state.source_path)
            continue

        if choice == "5":
            console.print("\n[bold]Settings[/bold]")
            answer = Prompt.ask("Source encoding (blank for folder settings)", default=state.encoding or "", show_default=bool(state.encoding))
            state.encoding = answer.strip() or None
            state.show = Confirm.ask("Show output after converting?", default=state.show)
            continue

        if choice == "0":
            console.print("Bye.")
            return

        console.print("[yellow]Invalid option.[/yellow]")
