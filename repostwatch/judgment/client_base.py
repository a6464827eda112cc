from abc import ABC, abstractmethod


class BaseJudgmentClient(ABC):
    """Contract for provider-specific generative-text clients."""

    @abstractmethod
    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        image_urls: list[str] | None = None,
    ) -> str:
        """Return the provider reply as plain text.

        ``image_urls`` may hold http(s) URLs or ``data:`` URLs carrying inline
        image bytes.
        """
