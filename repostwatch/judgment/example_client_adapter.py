"""Example judgment client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseJudgmentClient and register the provider in JudgmentGatewayFactory.
"""

from typing import ClassVar

from repostwatch.judgment.client_base import BaseJudgmentClient


class ExampleClientAdapter(BaseJudgmentClient):
    """Example adapter that returns a fixed, well-formed reply.

    No network calls. The reply carries both the content-judgment labels and
    the image-comparison labels so either parser accepts it.
    """

    DEFAULT_REPLY: ClassVar[str] = (
        "Similarity: similar\n"
        "Verdict: ?\n"
        "Comment: Example adapter does not analyse content.\n"
    )

    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        image_urls: list[str] | None = None,
    ) -> str:
        _ = model, temperature, prompt, image_urls
        return self.DEFAULT_REPLY
