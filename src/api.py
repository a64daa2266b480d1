import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

from fastapi import Depends, FastAPI, Form
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

# Ensure sibling modules under src/ are importable in both run modes:
# 1) uvicorn src.api:app
# 2) uvicorn api:app --app-dir src
SRC_DIR = Path(__file__).resolve().parent
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from answer_formatter import format_fragment, format_payload
from faq_store import FaqStore
from logging_setup import setup_logging
from matcher import match
from settings import Settings

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def get_store() -> FaqStore:
    settings = get_settings()
    return FaqStore(
        settings.faq_source,
        cache_ttl=settings.cache_ttl,
        timeout=settings.fetch_timeout,
        max_retries=settings.fetch_retries,
        backoff=settings.fetch_backoff,
    )


settings = get_settings()
setup_logging(settings.log_level)

app = FastAPI(title="FAQ Widget API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class AskRequest(BaseModel):
    q: str = ""
    debug: bool = False


class AskResponse(BaseModel):
    query: str
    answer: str
    matched: bool
    rule: str
    question: str | None = None
    debug: dict[str, Any] | None = None


def _answer(raw_query: str, store: FaqStore, config: Settings, debug: bool) -> dict[str, Any]:
    records = store.load()
    result = match(raw_query, records, debug=debug)
    logger.info("FAQ match rule=%s records=%d", result.rule, len(records))
    return format_payload(raw_query, result, config.fallback_answer)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.post("/api/faq")
def faq(
    q: str = Form(""),
    debug: str = Form(""),
    store: FaqStore = Depends(get_store),
    config: Settings = Depends(get_settings),
):
    raw_query = q.strip()
    wants_debug = debug.strip().lower() in TRUTHY
    payload = _answer(raw_query, store, config, wants_debug)
    if wants_debug:
        return JSONResponse(AskResponse(**payload).model_dump())
    return HTMLResponse(format_fragment(raw_query, payload["answer"]))


@app.post("/api/ask", response_model=AskResponse)
def ask(
    req: AskRequest,
    store: FaqStore = Depends(get_store),
    config: Settings = Depends(get_settings),
) -> AskResponse:
    payload = _answer(req.q.strip(), store, config, req.debug)
    return AskResponse(**payload)


# Mounted last so the API routes take precedence over static files.
if settings.site_dir and Path(settings.site_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.site_dir, html=True), name="site")
