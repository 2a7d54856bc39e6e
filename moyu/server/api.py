# moyu/server/api.py
"""
Moyu HTTP API.

Exposes the converter to tools that cannot shell out to the CLI (editor
extensions, browser bookmarklets):
  1) POST /v1/synthesize: text in, fake code out (nothing touches disk)
  2) POST /v1/convert: convert a file on this machine, like `moyu convert`
  3) GET/PUT /v1/bookmarks: read or store the bookmark of a file pair

The server reads and writes files the caller names. Bind it to localhost;
browser calls are only accepted from localhost origins.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .. import __version__
from ..config import ConvertOptions, load_convert_options
from ..convert import convert_file, convert_text
from ..errors import ConversionError
from ..store.bookmarks import bookmark_path_for, load_bookmark, save_bookmark

logger = logging.getLogger(__name__)

LOCAL_ORIGIN_RE = r"https?://(localhost|127\.0\.0\.1|\[::1\])(:\d+)?$"


class SynthesizeRequest(BaseModel):
    """Text to disguise."""

    text: str
    seed: Optional[int] = None


class SynthesizeResponse(BaseModel):
    code: str
    lines: int


class ConvertRequest(BaseModel):
    """A source file on the server's filesystem."""

    path: str
    encoding: Optional[str] = None
    seed: Optional[int] = None


class ConvertResponse(BaseModel):
    source: str
    target: str
    bookmark: int = Field(description="Zero-based line to reveal in the target")
    lines: int


class BookmarkRequest(BaseModel):
    path: str
    line: int = Field(ge=0, description="Zero-based line in the generated file")


class BookmarkResponse(BaseModel):
    path: str
    sidecar: str
    line: int


def create_app(*, default_encoding: Optional[str] = None) -> FastAPI:
    """
    Create the FastAPI app.

    Args:
        default_encoding: Encoding used when a request does not name one and
            the file's folder has no settings override.

    Returns:
        FastAPI app.
    """
    app = FastAPI(title="Moyu API", version=__version__)

    # Handlers write files, so only pages served from this machine may call them
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=LOCAL_ORIGIN_RE,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _options_for(path: Path, encoding: Optional[str] = None) -> ConvertOptions:
        opts = load_convert_options(path.expanduser().resolve().parent)
        if encoding:
            opts.encoding = encoding
        elif default_encoding and "encoding" not in opts.from_settings:
            opts.encoding = default_encoding
        return opts

    def _rng(seed: Optional[int]) -> Optional[random.Random]:
        return random.Random(seed) if seed is not None else None

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.post("/v1/synthesize", response_model=SynthesizeResponse)
    def synthesize(req: SynthesizeRequest) -> SynthesizeResponse:
        code = convert_text(req.text, ConvertOptions(), rng=_rng(req.seed))
        return SynthesizeResponse(code=code, lines=code.count("\n"))

    @app.post("/v1/convert", response_model=ConvertResponse)
    def convert(req: ConvertRequest) -> ConvertResponse:
        path = Path(req.path)
        try:
            result = convert_file(path, _options_for(path, req.encoding), rng=_rng(req.seed))
        except ConversionError as exc:
            logger.exception("Conversion failed for %s", path)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return ConvertResponse(
            source=str(result.source),
            target=str(result.target),
            bookmark=result.bookmark,
            lines=result.line_count,
        )

    @app.get("/v1/bookmarks", response_model=BookmarkResponse)
    def get_bookmark(path: str) -> BookmarkResponse:
        p = Path(path)
        opts = _options_for(p)
        return BookmarkResponse(path=path, sidecar=str(bookmark_path_for(p, opts)), line=load_bookmark(p, opts))

    @app.put("/v1/bookmarks", response_model=BookmarkResponse)
    def put_bookmark(req: BookmarkRequest) -> BookmarkResponse:
        p = Path(req.path)
        try:
            sidecar = save_bookmark(p, req.line, _options_for(p))
        except ConversionError as exc:
            logger.exception("Bookmark save failed for %s", p)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return BookmarkResponse(path=req.path, sidecar=str(sidecar), line=req.line)

    return app
