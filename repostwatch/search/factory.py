from repostwatch.classification.lists import DomainLists
from repostwatch.config.settings import Settings
from repostwatch.search.base import BaseImageSearchGateway
from repostwatch.search.example_adapter import ExampleSearchGateway
from repostwatch.search.vision_adapter import GoogleVisionGateway


class SearchGatewayFactory:
    """Creates the configured image search adapter."""

    PROVIDERS = ("google_vision", "example")

    @classmethod
    def create(cls, settings: Settings, lists: DomainLists) -> BaseImageSearchGateway:
        provider = settings.search_provider.lower()
        if provider == "example":
            return ExampleSearchGateway()
        if provider == "google_vision":
            patterns = lists.text_search_patterns if settings.filter_text_search_pages else None
            return GoogleVisionGateway(
                api_key=settings.vision_api_key,
                endpoint=settings.vision_endpoint,
                max_results=settings.vision_max_results,
                timeout_seconds=settings.vision_timeout_seconds,
                related_threshold=settings.related_pages_threshold,
                text_search_patterns=patterns,
            )
        raise ValueError(
            f"Unknown search provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
