"""Client for the text parsing service (Anthropic Messages API)."""

from __future__ import annotations

import base64
import time
from types import TracebackType
from typing import Any

import httpx

from shoplist.domain.shopping import FridgeAnalysis
from shoplist.parsing.completion import extract_fridge_analysis, extract_item_names
from shoplist.parsing.errors import (
    AuthenticationFailed,
    EmptyInput,
    MalformedResponse,
    MissingCredential,
    ParsingServiceError,
    QuotaExceeded,
    ServiceError,
)
from shoplist.parsing.image_helpers import prepare_image_bytes
from shoplist.parsing.prompts import FRIDGE_ANALYSIS_PROMPT, build_shopping_list_prompt
from shoplist.runtime.logging import get_logger
from shoplist.runtime.settings import ServiceSettings

logger = get_logger(__name__)

VALIDATION_PROBE_TEXT = "test"


def _raise_for_status(response: httpx.Response) -> None:
    """Map non-200 responses onto the parsing error taxonomy."""
    status = response.status_code
    if status == 200:
        return
    if status == 401:
        raise AuthenticationFailed()
    if status == 429:
        raise QuotaExceeded()
    raise ServiceError(status)


def _completion_text(response: httpx.Response) -> str:
    """Pull content[0].text out of a Messages API response envelope."""
    try:
        envelope = response.json()
    except ValueError as e:
        raise MalformedResponse("Invalid response from the server.") from e

    content = envelope.get("content") if isinstance(envelope, dict) else None
    if not isinstance(content, list) or not content:
        raise MalformedResponse("Invalid response from the server.")

    first = content[0]
    text = first.get("text") if isinstance(first, dict) else None
    if not isinstance(text, str):
        raise MalformedResponse("Invalid response from the server.")
    return text


class ParsingServiceClient:
    """Sends list text and fridge photos to the parsing service.

    The httpx client may be injected (tests pass one built on
    httpx.MockTransport); a client created here is closed by close().
    Requests are never retried.
    """

    def __init__(self, settings: ServiceSettings | None = None, http_client: httpx.Client | None = None) -> None:
        self.settings = settings or ServiceSettings()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=self.settings.timeout)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> ParsingServiceClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _headers(self, api_key: str) -> dict[str, str]:
        return {
            "x-api-key": api_key,
            "anthropic-version": self.settings.api_version,
            "content-type": "application/json",
        }

    def _send(self, api_key: str, content: Any, max_tokens: int) -> str:
        body = {
            "model": self.settings.model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": content}],
        }

        # Header values go out as ASCII; anything else cannot be a valid key.
        if not api_key.isascii():
            raise AuthenticationFailed()

        start_time = time.time()
        try:
            response = self._client.post(
                self.settings.base_url,
                headers=self._headers(api_key),
                json=body,
                timeout=self.settings.timeout,
            )
        except httpx.RequestError as e:
            logger.error("Failed to reach parsing service: %s", e)
            raise ServiceError(None) from e
        except (httpx.InvalidURL, ValueError) as e:
            logger.error("Invalid parsing service URL %r: %s", self.settings.base_url, e)
            raise ServiceError(None) from e
        logger.info("Parsing service returned %s in %.2f seconds", response.status_code, time.time() - start_time)

        if response.status_code != 200:
            # Body is logged at debug only; it may echo list contents.
            logger.debug("Parsing service error body: %s", response.text)
        _raise_for_status(response)
        return _completion_text(response)

    def parse_shopping_list(self, text: str, api_key: str) -> list[str]:
        """
        Ask the service to split and normalize a shopping list.

        Args:
            text: Raw list text (dictated, typed or pasted)
            api_key: Service credential

        Returns:
            Item names in the order returned by the service

        Raises:
            MissingCredential, EmptyInput: Before any request is made
            AuthenticationFailed, QuotaExceeded, ServiceError: Transport failures
            MalformedResponse: No JSON array of strings in the completion
        """
        if not api_key or not api_key.strip():
            raise MissingCredential()
        if not text or not text.strip():
            raise EmptyInput()

        completion = self._send(api_key, build_shopping_list_prompt(text), self.settings.list_max_tokens)
        names = extract_item_names(completion)
        logger.debug("Service returned %d item(s)", len(names))
        return names

    def analyze_fridge_image(self, image_bytes: bytes, api_key: str) -> FridgeAnalysis:
        """Ask the service what is in a fridge photo and what is missing."""
        if not api_key or not api_key.strip():
            raise MissingCredential()

        jpeg_bytes = prepare_image_bytes(image_bytes)
        content = [
            {
                "type": "image",
                "source": {
                    "type": "base64",
                    "media_type": "image/jpeg",
                    "data": base64.b64encode(jpeg_bytes).decode("ascii"),
                },
            },
            {"type": "text", "text": FRIDGE_ANALYSIS_PROMPT},
        ]

        completion = self._send(api_key, content, self.settings.image_max_tokens)
        return extract_fridge_analysis(completion)

    def validate_api_key(self, api_key: str) -> bool:
        """Probe the service with a trivial list.

        Only an authentication failure (or no key at all) counts as invalid;
        network and other service errors cannot tell, so the key is assumed valid.
        """
        try:
            self.parse_shopping_list(VALIDATION_PROBE_TEXT, api_key)
        except (AuthenticationFailed, MissingCredential):
            return False
        except ParsingServiceError as e:
            logger.info("Key validation inconclusive (%s); assuming valid", e)
        return True
