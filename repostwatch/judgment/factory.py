from typing import ClassVar

from repostwatch.classification.lists import DomainLists
from repostwatch.config.settings import Settings
from repostwatch.judgment.base import BaseJudgmentGateway
from repostwatch.judgment.example_client_adapter import ExampleClientAdapter
from repostwatch.judgment.gateway import JudgmentGateway
from repostwatch.judgment.openai_client_adapter import OpenAIClientAdapter


class JudgmentGatewayFactory:
    """Creates the configured judgment gateway."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings, lists: DomainLists) -> BaseJudgmentGateway:
        """Create a configured judgment gateway from application settings."""
        provider = settings.judgment_provider.lower()
        if provider == "example":
            return JudgmentGateway(
                client=ExampleClientAdapter(),
                model="example",
                illegal_keywords=lists.illegal_keywords,
            )
        client = OpenAIClientAdapter(
            api_key=settings.judgment_api_key,
            timeout_seconds=settings.judgment_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return JudgmentGateway(
            client=client,
            model=settings.judgment_model_name,
            temperature=settings.judgment_temperature,
            illegal_keywords=lists.illegal_keywords,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.judgment_base_url or "").strip()
            if not url:
                raise ValueError(
                    "judgment_base_url is required for judgment_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown judgment provider '{provider}'. Choose from: {supported}"
        )
