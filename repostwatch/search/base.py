from abc import ABC, abstractmethod

from repostwatch.search.models import SearchResult


class BaseImageSearchGateway(ABC):
    """Contract for all reverse-image-search adapters."""

    @abstractmethod
    async def search(self, image_bytes: bytes) -> SearchResult:
        """Find web pages and images that match ``image_bytes``.

        Args:
            image_bytes: Raw raster image content.

        Returns:
            SearchResult with candidate URLs, or with ``error`` set when the
            provider failed or rejected the image.

        Raises:
            ConfigurationError: if the provider credential is missing.
        """
