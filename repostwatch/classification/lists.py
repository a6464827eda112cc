"""Domain allow/deny lists injected into the classifier."""

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from repostwatch.classification.exceptions import DomainListsError


class DomainLists(BaseModel):
    """Operational data consulted by the classifier and the gateways.

    Entries are matched as lower-case substrings of a domain, so ``x.com``
    also matches ``mobile.x.com``.
    """

    premium_official: list[str] = Field(default_factory=list)
    publishers: list[str] = Field(default_factory=list)
    legitimate_sellers: list[str] = Field(default_factory=list)
    social_media: list[str] = Field(default_factory=list)
    suspicious: list[str] = Field(default_factory=list)
    image_share: list[str] = Field(default_factory=list)
    unofficial_viewers: list[str] = Field(default_factory=list)
    art_sites: list[str] = Field(default_factory=list)
    forums: list[str] = Field(default_factory=list)
    text_search_patterns: list[str] = Field(default_factory=list)
    illegal_keywords: list[str] = Field(default_factory=list)

    @field_validator(
        "premium_official",
        "publishers",
        "legitimate_sellers",
        "social_media",
        "suspicious",
        "image_share",
        "unofficial_viewers",
        "art_sites",
        "forums",
        "text_search_patterns",
    )
    @classmethod
    def _lowercase(cls, values: list[str]) -> list[str]:
        return [v.strip().lower() for v in values if v and v.strip()]

    @property
    def official(self) -> list[str]:
        return [*self.publishers, *self.legitimate_sellers]

    @classmethod
    def from_file(cls, path: Path | str) -> "DomainLists":
        """Load lists from a JSON document.

        Raises:
            DomainListsError: if the file is missing, not JSON, or malformed.
        """
        list_path = Path(path)
        try:
            data = json.loads(list_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise DomainListsError(f"Failed to load domain lists: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise DomainListsError(f"Invalid JSON in domain lists: {list_path}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise DomainListsError(f"Domain lists are invalid: {list_path}\n{exc}") from exc
