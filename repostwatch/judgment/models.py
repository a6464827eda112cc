from dataclasses import dataclass
from enum import Enum

from repostwatch.classification.models import Judgment


class Similarity(str, Enum):
    """Outcome of comparing the uploaded image with a candidate."""

    IDENTICAL = "identical"
    SIMILAR = "similar"
    DIFFERENT = "different"


@dataclass(frozen=True)
class ContentJudgment:
    """Parsed verdict for a single candidate page."""

    judgment: Judgment
    reason: str
    supplement: str | None = None


@dataclass(frozen=True)
class ImageComparison:
    """Parsed image-similarity verdict for a single candidate."""

    similarity: Similarity
    reason: str

    @property
    def should_analyze_further(self) -> bool:
        return self.similarity is not Similarity.DIFFERENT
