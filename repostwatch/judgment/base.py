from abc import ABC, abstractmethod

from repostwatch.classification.models import SocialPostInfo
from repostwatch.judgment.models import ContentJudgment, ImageComparison


class BaseJudgmentGateway(ABC):
    """Contract for generative judgment of candidate URLs."""

    @abstractmethod
    async def judge_content(
        self,
        url: str,
        page_text: str | None = None,
        is_social: bool = False,
        social: SocialPostInfo | None = None,
        domain_type: str = "other",
    ) -> ContentJudgment:
        """Judge whether the page at ``url`` reposts the image unlawfully.

        Malformed or failed replies degrade to an indeterminate judgment.

        Raises:
            ConfigurationError: if the provider credential is missing.
        """

    @abstractmethod
    async def compare_images(
        self,
        original_image: bytes,
        candidate_url: str,
        media_type: str = "image/png",
    ) -> ImageComparison:
        """Decide whether the candidate shows the same artwork as the original.

        Raises:
            ConfigurationError: if the provider credential is missing.
        """
