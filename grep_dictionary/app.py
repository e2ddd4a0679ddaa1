"""
Web frontend and JSON API for searching the word list by regular expression.
Run: uvicorn grep_dictionary.app:app --reload --host 0.0.0.0
Then open http://localhost:8000
"""
from __future__ import annotations

import logging
import os
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from pydantic import BaseModel

from .grep import Mode, grep
from .matcher import InvalidPatternError
from .page import render_page
from .words import WordListError, WordStore

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

logger = logging.getLogger(__name__)

CACHE_MAX_AGE = 86400
GZIP_MINIMUM_SIZE = 1000


@lru_cache(maxsize=1)
def _installed_version() -> str:
    try:
        return version("grep-dictionary")
    except PackageNotFoundError:
        return "dev"


def get_app_version() -> str:
    return os.environ.get("APP_VERSION") or _installed_version()


def _cache_headers() -> dict[str, str]:
    return {
        "Cache-Control": f"public, max-age={CACHE_MAX_AGE}",
        "ETag": f'"{get_app_version()}"',
    }


class MatchSegments(BaseModel):
    before: str
    match: str
    after: str


class GrepResponse(BaseModel):
    ok: bool = True
    pattern: str
    mode: Mode
    count: int
    words: list[str] | None = None
    matches: list[MatchSegments] | None = None


def get_word_store(request: Request) -> WordStore:
    return request.app.state.word_store


def create_app(word_store: WordStore | None = None) -> FastAPI:
    """Build the app around one WordStore shared by every request."""
    app = FastAPI(title="Grep Dictionary")
    app.state.word_store = word_store or WordStore()
    app.add_middleware(GZipMiddleware, minimum_size=GZIP_MINIMUM_SIZE)

    @app.get("/", response_class=HTMLResponse)
    def index(
        pattern: str = "",
        highlight: str = "",
        store: WordStore = Depends(get_word_store),
    ):
        """Search page. Runs a search only when pattern is set."""
        try:
            words = store.get_words()
        except WordListError as e:
            logger.error("%s", e)
            return PlainTextResponse("Internal Server Error", status_code=500)

        matches = None
        error = ""
        if pattern:
            try:
                matches = grep(pattern, words, Mode.SEGMENTED)
            except InvalidPatternError as e:
                error = e.message
        html = render_page(pattern, matches, error=error, highlight=highlight == "on")
        return HTMLResponse(html, headers=_cache_headers())

    @app.get("/api/grep")
    def api_grep(
        pattern: str,
        mode: Mode = Mode.PLAIN,
        store: WordStore = Depends(get_word_store),
    ):
        """Return matching words, or before/match/after segments in segmented mode."""
        try:
            words = store.get_words()
        except WordListError as e:
            logger.error("%s", e)
            return JSONResponse({"ok": False, "error": "Word list unavailable."}, status_code=500)
        try:
            records = grep(pattern, words, mode)
        except InvalidPatternError as e:
            return JSONResponse(
                {"ok": False, "pattern": pattern, "error": e.message},
                headers=_cache_headers(),
            )
        out = GrepResponse(pattern=pattern, mode=mode, count=len(records))
        if mode is Mode.SEGMENTED:
            out.matches = [MatchSegments(**r._asdict()) for r in records]
        else:
            out.words = list(records)
        return JSONResponse(out.model_dump(mode="json", exclude_none=True), headers=_cache_headers())

    @app.get("/healthz")
    def healthz(store: WordStore = Depends(get_word_store)):
        return {"ok": True, "words_loaded": store.loaded, "version": get_app_version()}

    return app


app = create_app()
