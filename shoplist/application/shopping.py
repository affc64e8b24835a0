"""Shopping list parsing workflow orchestration.

Delegated parsing is attempted only when it is enabled and an API key is
present. Any delegated failure falls back to manual splitting of the same
text; the failure message is handed back as a warning so the caller can
show it once. Manual-only runs never carry a warning.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from shoplist.domain.shopping import Category, FridgeAnalysis, ShoppingItem
from shoplist.parsing.categories import CategoryKeywordTable, classify_item
from shoplist.parsing.errors import ParsingServiceError
from shoplist.parsing.segmenter import split_items
from shoplist.parsing.sort_order import append_items, build_items
from shoplist.runtime import get_logger
from shoplist.runtime.parsing_service import ParsingServiceClient

logger = get_logger(__name__)

ProcessStatus = Literal[
    "manual",
    "delegated",
    "fallback",
    "cancelled",
]

FridgeStatus = Literal[
    "ok",
    "failed",
]


@dataclass(frozen=True)
class ProcessListRequest:
    """Inputs for turning raw text into a shopping list."""

    text: str
    use_ai: bool = False
    api_key: str = ""

    @property
    def attempts_delegated(self) -> bool:
        return self.use_ai and bool(self.api_key.strip())


@dataclass(frozen=True)
class ProcessListResult:
    """Outcome of a parse; items are sorted by sort_order."""

    status: ProcessStatus
    items: list[ShoppingItem] = field(default_factory=list)
    warning: str | None = None


@dataclass(frozen=True)
class _DelegatedOutcome:
    names: list[str] | None = None
    error: ParsingServiceError | None = None


def _attempt_delegated(client: ParsingServiceClient, request: ProcessListRequest) -> _DelegatedOutcome:
    try:
        return _DelegatedOutcome(names=client.parse_shopping_list(request.text, request.api_key))
    except ParsingServiceError as e:
        return _DelegatedOutcome(error=e)


def _categorize(names: Sequence[str], table: CategoryKeywordTable | None) -> list[ShoppingItem]:
    overflow: list[str] = []
    items = build_items(names, table, warning_sink=overflow)
    for message in overflow:
        logger.warning(message)
    return items


def run_process_list(
    request: ProcessListRequest,
    client: ParsingServiceClient | None = None,
    table: CategoryKeywordTable | None = None,
    is_cancelled: Callable[[], bool] | None = None,
) -> ProcessListResult:
    """Run parse flow: delegated (optional) -> manual fallback -> categorize -> sort.

    Args:
        request: Text plus the delegated-parsing toggle and key
        client: Parsing service client; one is created (and closed) if needed
        table: Keyword table; built-in defaults when omitted
        is_cancelled: Checked after the network call; a true result discards it

    Never raises for parsing service failures.
    """
    warning: str | None = None

    if request.attempts_delegated:
        if client is None:
            with ParsingServiceClient() as own_client:
                outcome = _attempt_delegated(own_client, request)
        else:
            outcome = _attempt_delegated(client, request)

        if is_cancelled is not None and is_cancelled():
            logger.debug("Parse cancelled by caller; discarding service result")
            return ProcessListResult(status="cancelled")

        if outcome.names is not None:
            return ProcessListResult(status="delegated", items=_categorize(outcome.names, table))

        logger.warning("Delegated parsing failed: %s; using manual parsing", outcome.error)
        warning = str(outcome.error)

    items = _categorize(split_items(request.text), table)
    if warning is not None:
        return ProcessListResult(status="fallback", items=items, warning=warning)
    return ProcessListResult(status="manual", items=items)


def process(
    raw_text: str,
    use_delegated: bool,
    credential: str,
    client: ParsingServiceClient | None = None,
    table: CategoryKeywordTable | None = None,
) -> tuple[list[ShoppingItem], str | None]:
    """Caller-facing shortcut returning (items, warning)."""
    result = run_process_list(
        ProcessListRequest(text=raw_text, use_ai=use_delegated, api_key=credential),
        client=client,
        table=table,
    )
    return result.items, result.warning


def classify(name: str, table: CategoryKeywordTable | None = None) -> Category:
    """Categorize a single externally sourced name."""
    return classify_item(name, table)


@dataclass(frozen=True)
class FridgeAnalysisRequest:
    """Inputs for analyzing a fridge photo."""

    image_bytes: bytes
    api_key: str


@dataclass(frozen=True)
class FridgeAnalysisResult:
    """Outcome from fridge photo analysis."""

    status: FridgeStatus
    analysis: FridgeAnalysis | None = None
    error: str | None = None


def run_fridge_analysis(
    request: FridgeAnalysisRequest,
    client: ParsingServiceClient | None = None,
) -> FridgeAnalysisResult:
    """Analyze a fridge photo; failures are reported, never raised."""
    try:
        if client is None:
            with ParsingServiceClient() as own_client:
                analysis = own_client.analyze_fridge_image(request.image_bytes, request.api_key)
        else:
            analysis = client.analyze_fridge_image(request.image_bytes, request.api_key)
    except ParsingServiceError as e:
        logger.warning("Fridge analysis failed: %s", e)
        return FridgeAnalysisResult(status="failed", error=str(e))

    logger.info(
        "Fridge analysis found %d item(s), %d suggestion(s)",
        len(analysis.items_found),
        len(analysis.suggestions),
    )
    return FridgeAnalysisResult(status="ok", analysis=analysis)


def add_suggestions(
    items: Sequence[ShoppingItem],
    suggestions: Sequence[str],
    table: CategoryKeywordTable | None = None,
) -> list[ShoppingItem]:
    """Append chosen suggestions after the current list items."""
    return append_items(items, suggestions, table)
