"""Generative judgment of candidate URLs."""

import base64
from pathlib import Path

from repostwatch.classification.models import Judgment, SocialPostInfo
from repostwatch.judgment.base import BaseJudgmentGateway
from repostwatch.judgment.client_base import BaseJudgmentClient
from repostwatch.judgment.exceptions import JudgmentError
from repostwatch.judgment.models import ContentJudgment, ImageComparison, Similarity
from repostwatch.judgment.prompt_loader import (
    IMAGE_COMPARISON_PROMPT,
    SOCIAL_JUDGMENT_PROMPT,
    WEB_JUDGMENT_PROMPT,
    load_prompt_template,
)
from repostwatch.judgment.reply_parser import ReplyParser
from repostwatch.logging.logger import Log

NO_CONTENT = "Content could not be retrieved."
UNKNOWN = "unknown"


class JudgmentGateway(BaseJudgmentGateway):
    """Sends fixed instruction templates to a generative client and parses replies."""

    def __init__(
        self,
        *,
        client: BaseJudgmentClient,
        model: str,
        temperature: float = 0.0,
        illegal_keywords: list[str] | None = None,
        parser: ReplyParser | None = None,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._illegal_keywords = illegal_keywords or []
        self._parser = parser or ReplyParser()
        self._web_template = load_prompt_template(WEB_JUDGMENT_PROMPT, prompt_dir)
        self._social_template = load_prompt_template(SOCIAL_JUDGMENT_PROMPT, prompt_dir)
        self._comparison_template = load_prompt_template(IMAGE_COMPARISON_PROMPT, prompt_dir)

    async def judge_content(
        self,
        url: str,
        page_text: str | None = None,
        is_social: bool = False,
        social: SocialPostInfo | None = None,
        domain_type: str = "other",
    ) -> ContentJudgment:
        prompt = (
            self._build_social_prompt(url, page_text, social)
            if is_social
            else self._build_web_prompt(url, page_text, domain_type)
        )
        Log.debug(f"Judgment prompt for {url}:\n{prompt}")

        try:
            reply = await self._client.generate(
                model=self._model,
                temperature=self._temperature,
                prompt=prompt,
            )
        except JudgmentError as exc:
            Log.warning(f"Judgment call failed for {url}: {exc}")
            return ContentJudgment(
                judgment=Judgment.INDETERMINATE,
                reason=f"AI analysis failed: {exc}",
            )

        Log.debug(f"Judgment reply for {url}:\n{reply}")
        return self._parser.parse_judgment(reply)

    async def compare_images(
        self,
        original_image: bytes,
        candidate_url: str,
        media_type: str = "image/png",
    ) -> ImageComparison:
        prompt = self._comparison_template.format(url=candidate_url)
        encoded = base64.b64encode(original_image).decode("ascii")
        image_urls = [f"data:{media_type};base64,{encoded}", candidate_url]

        try:
            reply = await self._client.generate(
                model=self._model,
                temperature=self._temperature,
                prompt=prompt,
                image_urls=image_urls,
            )
        except JudgmentError as exc:
            Log.warning(f"Image comparison failed for {candidate_url}: {exc}")
            return ImageComparison(
                similarity=Similarity.SIMILAR,
                reason=f"Image comparison failed: {exc}",
            )

        return self._parser.parse_similarity(reply)

    def _build_web_prompt(self, url: str, page_text: str | None, domain_type: str) -> str:
        return self._web_template.format(
            url=url,
            domain_type=domain_type,
            page_text=page_text or NO_CONTENT,
            illegal_keywords=", ".join(self._illegal_keywords) or "(none)",
        )

    def _build_social_prompt(
        self,
        url: str,
        page_text: str | None,
        social: SocialPostInfo | None,
    ) -> str:
        return self._social_template.format(
            url=url,
            platform=social.platform if social else UNKNOWN,
            username=f"@{social.username}" if social and social.username else UNKNOWN,
            post_id=social.post_id if social and social.post_id else UNKNOWN,
            description=social.description if social else UNKNOWN,
            page_text=page_text or NO_CONTENT,
        )
