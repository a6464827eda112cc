import base64
from typing import Any

import httpx

from repostwatch.config.exceptions import ConfigurationError
from repostwatch.logging.logger import Log
from repostwatch.search.base import BaseImageSearchGateway
from repostwatch.search.exceptions import SearchError, SearchNetworkError, SearchRejectedError
from repostwatch.search.models import MatchType, SearchResult
from repostwatch.search.web_detection import collect_candidates

_INVALID_ARGUMENT = 3
UNREADABLE_IMAGE_MESSAGE = "Could not read the image data. Please try a different image."
NO_MATCHES_MESSAGE = "No matching images were found for this image."


class GoogleVisionGateway(BaseImageSearchGateway):
    """Reverse image search built on the Cloud Vision WEB_DETECTION feature."""

    def __init__(
        self,
        *,
        api_key: str,
        endpoint: str,
        max_results: int = 100,
        timeout_seconds: int = 30,
        related_threshold: int = 5,
        text_search_patterns: list[str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._endpoint = endpoint
        self._max_results = max_results
        self._timeout_seconds = timeout_seconds
        self._related_threshold = related_threshold
        self._text_search_patterns = text_search_patterns
        self._transport = transport

    async def search(self, image_bytes: bytes) -> SearchResult:
        if not self._api_key:
            raise ConfigurationError("Image search API key is not configured (VISION_API_KEY)")

        try:
            web_detection = await self._annotate(image_bytes)
        except SearchError as exc:
            Log.error(f"Image search failed: {exc}")
            return SearchResult(error=str(exc))

        if web_detection is None:
            Log.info("Image search returned no web detection block")
            return SearchResult(message=NO_MATCHES_MESSAGE)

        candidates = collect_candidates(
            web_detection,
            related_threshold=self._related_threshold,
            text_search_patterns=self._text_search_patterns,
        )
        result = SearchResult(
            candidates=candidates,
            message=None if candidates else NO_MATCHES_MESSAGE,
        )
        Log.info(
            "Image search complete",
            exact=result.count(MatchType.EXACT),
            partial=result.count(MatchType.PARTIAL),
            related=result.count(MatchType.RELATED),
        )
        return result

    def _build_request(self, image_bytes: bytes) -> dict[str, object]:
        return {
            "requests": [
                {
                    "image": {"content": base64.b64encode(image_bytes).decode("ascii")},
                    "features": [
                        {"type": "WEB_DETECTION", "maxResults": self._max_results}
                    ],
                    "imageContext": {
                        "webDetectionParams": {"includeGeoResults": False}
                    },
                }
            ]
        }

    async def _annotate(self, image_bytes: bytes) -> dict[str, Any] | None:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self._endpoint,
                    params={"key": self._api_key},
                    json=self._build_request(image_bytes),
                )
        except httpx.HTTPError as exc:
            raise SearchNetworkError(f"Image search request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise SearchNetworkError(
                f"Image search returned invalid JSON (HTTP {response.status_code})"
            ) from exc

        if response.is_error:
            message = _error_message(data) or "Unknown error"
            raise SearchNetworkError(
                f"Image search request failed (HTTP {response.status_code}): {message}"
            )

        responses = data.get("responses") if isinstance(data, dict) else None
        first = responses[0] if isinstance(responses, list) and responses else {}
        if not isinstance(first, dict):
            first = {}

        error = first.get("error")
        if isinstance(error, dict):
            if error.get("code") == _INVALID_ARGUMENT:
                raise SearchRejectedError(UNREADABLE_IMAGE_MESSAGE, code=_INVALID_ARGUMENT)
            raise SearchRejectedError(
                f"Image search service error: {error.get('message', 'Unknown error')}",
                code=error.get("code"),
            )

        web_detection = first.get("webDetection")
        if not isinstance(web_detection, dict):
            return None
        return web_detection


def _error_message(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        return str(message) if message else None
    return None
