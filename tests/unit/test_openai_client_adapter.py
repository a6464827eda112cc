import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from repostwatch.config.exceptions import ConfigurationError
from repostwatch.judgment.exceptions import JudgmentError, JudgmentNetworkError
from repostwatch.judgment.openai_client_adapter import OpenAIClientAdapter

_REQUEST = httpx.Request("POST", "https://api.test/v1/chat/completions")


def _response(content: str | None) -> MagicMock:
    return MagicMock(choices=[MagicMock(message=MagicMock(content=content))])


def _patched_client(create: AsyncMock):  # type: ignore[no-untyped-def]
    mock_client = MagicMock()
    mock_client.chat.completions.create = create
    return patch(
        "repostwatch.judgment.openai_client_adapter.openai.AsyncOpenAI",
        return_value=mock_client,
    )


def _adapter(api_key: str = "sk-test") -> OpenAIClientAdapter:
    return OpenAIClientAdapter(
        api_key=api_key,
        timeout_seconds=10,
        base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
    )


def _generate(adapter: OpenAIClientAdapter, **kwargs) -> str:  # type: ignore[no-untyped-def]
    return asyncio.run(adapter.generate(model="gemini-2.0-flash", temperature=0.0, prompt="p", **kwargs))


class TestOpenAIClientAdapter:
    def test_returns_message_content(self) -> None:
        create = AsyncMock(return_value=_response("Verdict: ○"))
        with _patched_client(create) as constructor:
            assert _generate(_adapter()) == "Verdict: ○"

        constructor.assert_called_once_with(
            api_key="sk-test",
            timeout=10,
            base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
        )

    def test_builds_multimodal_message(self) -> None:
        create = AsyncMock(return_value=_response("ok"))
        with _patched_client(create):
            _generate(_adapter(), image_urls=["data:image/png;base64,AAA", "https://a.example/x.jpg"])

        content = create.await_args.kwargs["messages"][0]["content"]
        assert content[0] == {"type": "text", "text": "p"}
        assert content[1] == {"type": "image_url", "image_url": {"url": "data:image/png;base64,AAA"}}
        assert content[2]["image_url"]["url"] == "https://a.example/x.jpg"

    def test_client_is_reused(self) -> None:
        create = AsyncMock(return_value=_response("ok"))
        adapter = _adapter()
        with _patched_client(create) as constructor:
            _generate(adapter)
            _generate(adapter)
        constructor.assert_called_once()

    def test_missing_key_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="JUDGMENT_API_KEY"):
            _generate(_adapter(api_key=""))

    def test_connection_error_is_network_error(self) -> None:
        create = AsyncMock(side_effect=openai.APIConnectionError(request=_REQUEST))
        with _patched_client(create), pytest.raises(JudgmentNetworkError, match="network error"):
            _generate(_adapter())

    def test_timeout_is_network_error(self) -> None:
        create = AsyncMock(side_effect=httpx.ReadTimeout("slow"))
        with _patched_client(create), pytest.raises(JudgmentNetworkError):
            _generate(_adapter())

    def test_api_error_is_wrapped(self) -> None:
        create = AsyncMock(side_effect=openai.APIError("quota exceeded", request=_REQUEST, body=None))
        with _patched_client(create), pytest.raises(JudgmentNetworkError, match="API error"):
            _generate(_adapter())

    def test_no_choices(self) -> None:
        create = AsyncMock(return_value=MagicMock(choices=[]))
        with _patched_client(create), pytest.raises(JudgmentError, match="no choices"):
            _generate(_adapter())

    def test_empty_content(self) -> None:
        create = AsyncMock(return_value=_response(None))
        with _patched_client(create), pytest.raises(JudgmentError, match="empty response"):
            _generate(_adapter())
