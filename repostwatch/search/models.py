from dataclasses import dataclass, field
from enum import Enum


class MatchType(str, Enum):
    """How strongly the search service tied a URL to the uploaded image."""

    EXACT = "exact"
    PARTIAL = "partial"
    RELATED = "related"


@dataclass(frozen=True)
class CandidateUrl:
    """A URL returned by the image search, never mutated after creation."""

    url: str
    domain: str
    match_type: MatchType


@dataclass(frozen=True)
class SearchResult:
    """Normalized output of one image search.

    ``error`` distinguishes a failed search from a successful one that simply
    found nothing.
    """

    candidates: list[CandidateUrl] = field(default_factory=list)
    error: str | None = None
    message: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def count(self, match_type: MatchType) -> int:
        return sum(1 for c in self.candidates if c.match_type == match_type)
