from dataclasses import dataclass
from enum import Enum


class Judgment(str, Enum):
    """Four-valued verdict attached to a URL or to a whole upload."""

    CLEAR = "○"
    SUSPICIOUS = "△"
    VIOLATION = "×"
    INDETERMINATE = "?"


class DomainClassification(str, Enum):
    """Static category a domain falls into."""

    PREMIUM_OFFICIAL = "premium-official"
    OFFICIAL = "official"
    SNS = "sns"
    SUSPICIOUS = "suspicious"
    UNOFFICIAL = "unofficial"


@dataclass(frozen=True)
class SocialPostInfo:
    """Platform metadata recovered from a social-media URL shape."""

    platform: str
    description: str
    username: str | None = None
    post_id: str | None = None
    is_profile: bool = False
