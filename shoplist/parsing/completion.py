"""Extract JSON payloads from language-model completion text.

Completions are asked to be bare JSON but often come wrapped in a
markdown code fence or surrounded by prose. Extraction is:

1. Strip a ```json ... ``` fence, else a generic ``` ... ``` fence
2. Slice from the first opening bracket to the last closing bracket
3. json.loads() and check the shape
"""

import json
from typing import Any

from shoplist.domain.shopping import FridgeAnalysis
from shoplist.parsing.errors import MalformedResponse

_JSON_FENCE = "```json"
_FENCE = "```"


def strip_code_fence(text: str) -> str:
    """Return the contents of the first fenced block, or the trimmed text."""
    cleaned = text.strip()

    for opening in (_JSON_FENCE, _FENCE):
        start = cleaned.find(opening)
        if start == -1:
            continue
        body_start = start + len(opening)
        end = cleaned.find(_FENCE, body_start)
        if end == -1:
            continue
        return cleaned[body_start:end].strip()

    return cleaned


def _slice_between(text: str, opening: str, closing: str) -> str:
    start = text.find(opening)
    end = text.rfind(closing)
    if start == -1 or end == -1:
        return text
    return text[start : end + 1]


def _load_json(payload: str) -> Any:
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise MalformedResponse(f"Response is not valid JSON: {e.msg}") from e


def _string_list(value: Any, field: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise MalformedResponse(f"Expected {field} to be a JSON array of strings")
    return [v for v in value if v.strip()]


def extract_item_names(text: str) -> list[str]:
    """
    Parse a completion that should contain a JSON array of item names.

    Args:
        text: Raw completion text, e.g. '```json\\n["milk", "bread"]\\n```'

    Returns:
        Item names in completion order, with blank entries removed

    Raises:
        MalformedResponse: No JSON array of strings could be extracted
    """
    payload = _slice_between(strip_code_fence(text), "[", "]")
    return _string_list(_load_json(payload), "items")


def extract_fridge_analysis(text: str) -> FridgeAnalysis:
    """Parse a completion that should contain {"itemsFound": [...], "suggestions": [...]}."""
    payload = _slice_between(strip_code_fence(text), "{", "}")
    data = _load_json(payload)
    if not isinstance(data, dict):
        raise MalformedResponse("Expected a JSON object")
    if "itemsFound" not in data or "suggestions" not in data:
        raise MalformedResponse("Expected itemsFound and suggestions in the response")

    return FridgeAnalysis(
        items_found=tuple(_string_list(data["itemsFound"], "itemsFound")),
        suggestions=tuple(_string_list(data["suggestions"], "suggestions")),
    )
