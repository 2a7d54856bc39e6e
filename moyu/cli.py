"""Moyu CLI.

Commands:
  - convert: turn a text file into fake code and show it at the bookmark
  - bookmark: save (or show) the reading position for a file pair
  - wizard: interactive menu
  - serve: local HTTP API
"""

from __future__ import annotations

from typing import Optional

import typer

from .cli_actions import do_bookmark, do_bookmark_status, do_convert
from .logging_config import setup_logging
from .ui.menu import run_menu

app = typer.Typer(add_completion=False, help="Moyu: read text files disguised as source code.")


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Global options."""
    setup_logging(verbose=verbose)


@app.command()
def convert(
    path: Optional[str] = typer.Argument(None, help="Text file to convert (prompted for when omitted)."),
    encoding: Optional[str] = typer.Option(None, "--encoding", "-e", help="Source encoding (default: gbk)."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output."),
    show: bool = typer.Option(True, "--show/--no-show", help="Display the result at the saved bookmark."),
):
    """Convert a text file into a fake .js file next to it."""
    code = do_convert(path=path, encoding=encoding, seed=seed, show=show)
    if code:
        raise typer.Exit(code=code)


@app.command()
def bookmark(
    path: str = typer.Argument(..., help="Source .txt file or its generated .js file."),
    line: Optional[int] = typer.Argument(None, help="Line number (1-based) in the generated file."),
):
    """Save the current reading line, or show the stored one when LINE is omitted."""
    if line is None:
        code = do_bookmark_status(path)
    else:
        code = do_bookmark(path, line)
    if code:
        raise typer.Exit(code=code)


@app.command()
def wizard():
    """Launch an interactive terminal wizard (menu)."""
    run_menu()


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Host to bind the API server."),
    port: int = typer.Option(17864, "--port", help="Port to bind the API server."),
    encoding: Optional[str] = typer.Option(None, "--encoding", "-e", help="Default source encoding."),
):
    """Start the local Moyu HTTP API.

    Endpoints:
      POST /v1/synthesize   text in, fake code out
      POST /v1/convert      convert a file on this machine
      GET|PUT /v1/bookmarks read or store a bookmark
    """
    import uvicorn
    from .server.api import create_app

    api = create_app(default_encoding=encoding)
    uvicorn.run(api, host=host, port=port, log_level="info")


def main() -> None:
    """CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
