# moyu/cli_actions.py
"""
Reusable CLI actions.

The main CLI (`moyu.cli`) calls these functions, and the wizard menu
(`moyu.ui.menu`) reuses them.

Every action returns a process exit code instead of exiting, so the wizard can
keep running after a failure.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from .config import ConvertOptions, load_convert_options
from .convert import ConversionResult, convert_file
from .errors import ConversionError
from .store.bookmarks import bookmark_path_for, has_bookmark, load_bookmark, save_bookmark
from .ui.host import ConsoleHost, Host

console = Console()
logger = logging.getLogger(__name__)


def _resolve_options(path: Path, encoding: Optional[str] = None) -> ConvertOptions:
    """
    Build conversion options for a file.

    Args:
        path: Source or target file; its folder may hold `.moyu/settings.json`.
        encoding: Optional encoding override (CLI flag).

    Returns:
        ConvertOptions.
    """
    opts = load_convert_options(path.expanduser().resolve().parent)
    if encoding:
        opts.encoding = encoding
    return opts


def run_conversion(
    host: Host,
    path: Optional[Path] = None,
    encoding: Optional[str] = None,
    rng: Optional[random.Random] = None,
    reveal: bool = True,
) -> Optional[ConversionResult]:
    """
    Convert a file chosen through `host` and reveal it at the stored bookmark.

    Args:
        host: Host used to pick the file and display the result.
        path: Source file; the host is asked when omitted.
        encoding: Optional encoding override.
        rng: Random source for template picks.
        reveal: Display the generated document afterwards.

    Returns:
        ConversionResult, or None if the user cancelled.

    Raises:
        ConversionError: If reading, decoding or writing fails.
    """
    if path is None:
        path = host.pick_source_path()
        if path is None:
            return None

    opts = _resolve_options(path, encoding)
    result = convert_file(path, opts, rng=rng)
    if reveal:
        host.reveal(result.target, result.bookmark)
    return result


def do_convert(
    path: Optional[str],
    encoding: Optional[str] = None,
    seed: Optional[int] = None,
    show: bool = True,
    host: Optional[Host] = None,
) -> int:
    """
    Convert a text file into fake code and print a summary.

    Args:
        path: Source file path (prompted for when None).
        encoding: Encoding override (defaults to settings, then gbk).
        seed: Seed for reproducible output.
        show: Display the generated document at the bookmark.
        host: Host adapter (console host by default).

    Returns:
        Exit code: 0 on success or cancel, 1 on failure.
    """
    host = host or ConsoleHost(console=console)
    rng = random.Random(seed) if seed is not None else None

    try:
        result = run_conversion(
            host,
            path=Path(path) if path else None,
            encoding=encoding,
            rng=rng,
            reveal=show,
        )
    except ConversionError as exc:
        console.print(f"[red]Conversion failed:[/red] {exc}")
        logger.exception("Conversion failed for %s", path or "<picked file>")
        return 1

    if result is None:
        console.print("[yellow]Cancelled.[/yellow]")
        return 0

    console.print(f"\n[bold green]Converted:[/bold green] {result.source}")
    console.print(f"Output: {result.target}")
    console.print(f"Lines: {result.line_count}")
    if result.bookmark > 0:
        console.print(f"Bookmark: line {result.bookmark + 1}")
    return 0


def do_bookmark(path: str, line: int) -> int:
    """
    Save a bookmark for a file pair.

    Args:
        path: Source or generated file.
        line: 1-based line number, as shown by editors.

    Returns:
        Exit code.
    """
    if line < 1:
        console.print(f"[red]Line numbers start at 1, got {line}.[/red]")
        return 1

    p = Path(path).expanduser()
    opts = _resolve_options(p)
    try:
        save_bookmark(p, line - 1, opts)
    except ConversionError as exc:
        console.print(f"[red]Bookmark not saved:[/red] {exc}")
        logger.exception("Bookmark save failed for %s", p)
        return 1

    console.print(f"[green]Bookmark saved at line {line}.[/green]")
    return 0


def do_bookmark_status(path: str) -> int:
    """
    Show the stored bookmark for a file pair.

    Args:
        path: Source or generated file.

    Returns:
        Exit code (always 0; a missing bookmark reads as line 1).
    """
    p = Path(path).expanduser()
    opts = _resolve_options(p)
    sidecar = bookmark_path_for(p, opts)
    value = load_bookmark(p, opts)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Sidecar")
    table.add_column("Stored", justify="right")
    table.add_column("Line", justify="right")
    table.add_row(str(sidecar), "yes" if has_bookmark(p, opts) else "no", str(value + 1))
    console.print(table)
    return 0
