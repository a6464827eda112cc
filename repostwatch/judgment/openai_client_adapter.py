import httpx
import openai

from repostwatch.config.exceptions import ConfigurationError
from repostwatch.judgment.client_base import BaseJudgmentClient
from repostwatch.judgment.exceptions import JudgmentError, JudgmentNetworkError


class OpenAIClientAdapter(BaseJudgmentClient):
    """Judgment client built on an OpenAI-compatible chat API.

    The underlying client is created on first use so a missing credential
    surfaces as a ConfigurationError for the call that needed it, not at
    startup.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._base_url = base_url
        self._client: openai.AsyncOpenAI | None = None

    def _get_client(self) -> openai.AsyncOpenAI:
        if not self._api_key:
            raise ConfigurationError(
                "Generative judgment API key is not configured (JUDGMENT_API_KEY)"
            )
        if self._client is None:
            self._client = openai.AsyncOpenAI(
                api_key=self._api_key,
                timeout=self._timeout_seconds,
                base_url=self._base_url,
            )
        return self._client

    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        image_urls: list[str] | None = None,
    ) -> str:
        client = self._get_client()
        content: list[dict[str, object]] = [{"type": "text", "text": prompt}]
        for url in image_urls or []:
            content.append({"type": "image_url", "image_url": {"url": url}})

        try:
            response = await client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[{"role": "user", "content": content}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise JudgmentNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise JudgmentNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise JudgmentError("AI returned no choices")
        text = response.choices[0].message.content
        if text is None:
            raise JudgmentError("AI returned empty response")
        return text
