"""FastAPI server for receiving shopping lists from a phone.

An iOS Shortcut can dictate a list and POST the text to /parse, or send a
fridge photo to /fridge, and show the sorted result.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from shoplist.application.shopping import (
    FridgeAnalysisRequest,
    ProcessListRequest,
    run_fridge_analysis,
    run_process_list,
)
from shoplist.parsing.categories import CategoryKeywordTable, classify_item
from shoplist.parsing.formatter import items_to_json
from shoplist.runtime.category_rules import load_category_keyword_table
from shoplist.runtime.logging import get_logger
from shoplist.runtime.parsing_service import ParsingServiceClient
from shoplist.runtime.settings import Settings, load_settings

logger = get_logger(__name__)


def get_settings() -> Settings:
    """Settings are re-read per request so edits apply without a restart."""
    return load_settings()


def make_client(settings: Settings) -> ParsingServiceClient:
    return ParsingServiceClient(settings.service)


def get_keyword_table() -> CategoryKeywordTable:
    """Keyword files are re-read per request, like settings."""
    load_category_keyword_table.cache_clear()
    return load_category_keyword_table()


async def _read_payload(request: Request) -> dict[str, Any]:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    form = await request.form()
    return {key: value for key, value in form.items()}


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


app = FastAPI(title="Shopping List Parser")


@app.post("/parse")
async def parse_list(request: Request) -> JSONResponse:
    """Parse posted text into a sorted, categorized list."""
    payload = await _read_payload(request)
    text = payload.get("text")
    if not isinstance(text, str):
        return JSONResponse({"status": "error", "message": "No text found in request"}, status_code=400)

    settings = get_settings()
    process_request = ProcessListRequest(
        text=text,
        use_ai=_as_bool(payload.get("use_ai"), settings.use_ai),
        api_key=settings.api_key,
    )
    table = get_keyword_table()

    def _run() -> Any:
        if not process_request.attempts_delegated:
            return run_process_list(process_request, table=table)
        with make_client(settings) as client:
            return run_process_list(process_request, client=client, table=table)

    result = await run_in_threadpool(_run)
    logger.info("Parsed %d item(s) via %s", len(result.items), result.status)

    return JSONResponse(
        {
            "status": result.status,
            "items": items_to_json(result.items),
            "warning": result.warning,
        }
    )


@app.post("/fridge")
async def analyze_fridge(request: Request) -> JSONResponse:
    """Analyze an uploaded fridge photo and suggest missing staples."""
    form = await request.form()

    file = None
    for key, value in form.items():
        logger.debug("Form field: key=%r, type=%s", key, type(value))
        if hasattr(value, "read"):
            file = value
            break

    if not file:
        return JSONResponse({"status": "error", "message": "No file found in request"}, status_code=400)

    settings = get_settings()
    if not settings.has_api_key:
        return JSONResponse({"status": "error", "message": "API key is not configured"}, status_code=400)

    contents = await file.read()
    table = get_keyword_table()

    def _run() -> Any:
        with make_client(settings) as client:
            return run_fridge_analysis(
                FridgeAnalysisRequest(image_bytes=contents, api_key=settings.api_key),
                client=client,
            )

    result = await run_in_threadpool(_run)
    if result.status != "ok" or result.analysis is None:
        return JSONResponse({"status": "error", "message": result.error}, status_code=502)

    return JSONResponse(
        {
            "status": "success",
            "itemsFound": list(result.analysis.items_found),
            "suggestions": [
                {"name": name, "category": classify_item(name, table).key}
                for name in result.analysis.suggestions
            ],
        }
    )


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}
