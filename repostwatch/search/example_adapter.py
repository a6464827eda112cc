"""Example search adapter.

Returns a fixed candidate list without any network calls. Useful for local
development and as a template for additional search providers.
"""

from typing import ClassVar

from repostwatch.search.base import BaseImageSearchGateway
from repostwatch.search.models import SearchResult
from repostwatch.search.web_detection import collect_candidates


class ExampleSearchGateway(BaseImageSearchGateway):
    """Search adapter that always reports the same web detection payload."""

    DEFAULT_WEB_DETECTION: ClassVar[dict[str, object]] = {
        "fullMatchingImages": [
            {"url": "https://www.shueisha.co.jp/books/items/example.html"},
        ],
        "partialMatchingImages": [
            {"url": "https://x.com/example_user/status/1234567890"},
        ],
        "pagesWithMatchingImages": [],
    }

    async def search(self, image_bytes: bytes) -> SearchResult:
        _ = image_bytes
        return SearchResult(candidates=collect_candidates(self.DEFAULT_WEB_DETECTION))
