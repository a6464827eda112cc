"""Static domain classification.

All checks are case-insensitive substring containment against the injected
:class:`DomainLists`. The classifier holds no mutable state and is safe to
share across concurrently processed items.
"""

from typing import ClassVar
from urllib.parse import urlparse

from repostwatch.classification.lists import DomainLists
from repostwatch.classification.models import DomainClassification, Judgment


def extract_domain(url: str) -> str:
    """Return the lower-cased hostname without a leading ``www.``.

    Unparseable URLs yield an empty string.
    """
    try:
        hostname = urlparse(url.strip()).hostname
    except ValueError:
        return ""
    if not hostname:
        return ""
    hostname = hostname.lower()
    if hostname.startswith("www."):
        hostname = hostname[4:]
    return hostname


def _matches(domain: str, entries: list[str]) -> bool:
    return bool(domain) and any(entry in domain for entry in entries)


class DomainClassifier:
    """Maps URLs to a :class:`DomainClassification` and an initial judgment."""

    IMAGE_EXTENSIONS: ClassVar[tuple[str, ...]] = (
        ".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".svg", ".ico",
        ".tiff", ".tif", ".avif", ".heic", ".heif", ".jfif", ".pjpeg", ".pjp",
    )

    INITIAL_JUDGMENTS: ClassVar[dict[DomainClassification, Judgment]] = {
        DomainClassification.PREMIUM_OFFICIAL: Judgment.CLEAR,
        DomainClassification.OFFICIAL: Judgment.CLEAR,
        DomainClassification.SNS: Judgment.SUSPICIOUS,
        DomainClassification.SUSPICIOUS: Judgment.SUSPICIOUS,
        DomainClassification.UNOFFICIAL: Judgment.SUSPICIOUS,
    }

    def __init__(self, lists: DomainLists) -> None:
        self._lists = lists

    def classify(self, url: str) -> DomainClassification:
        return self.classify_domain(extract_domain(url))

    def classify_domain(self, domain: str) -> DomainClassification:
        """Classify a bare domain; first matching list wins."""
        normalized = domain.strip().lower().removeprefix("www.")
        if _matches(normalized, self._lists.premium_official):
            return DomainClassification.PREMIUM_OFFICIAL
        if _matches(normalized, self._lists.official):
            return DomainClassification.OFFICIAL
        if _matches(normalized, self._lists.social_media):
            return DomainClassification.SNS
        if _matches(normalized, self._lists.suspicious):
            return DomainClassification.SUSPICIOUS
        return DomainClassification.UNOFFICIAL

    def initial_judgment(self, classification: DomainClassification) -> Judgment:
        return self.INITIAL_JUDGMENTS[classification]

    def initial_judgment_for(self, url: str) -> Judgment:
        """Initial judgment for a URL; direct image files are always ``?``."""
        if self.is_image_file(url):
            return Judgment.INDETERMINATE
        return self.initial_judgment(self.classify(url))

    def domain_type(self, domain: str) -> str:
        """Return a descriptive site category used in rationales and exports."""
        normalized = domain.strip().lower().removeprefix("www.")
        if _matches(normalized, self._lists.social_media):
            return "SNS"
        if _matches(normalized, self._lists.image_share):
            return "image sharing"
        if _matches(normalized, self._lists.unofficial_viewers):
            return "unofficial viewer"
        if _matches(normalized, self._lists.art_sites):
            return "illustration site"
        if _matches(normalized, self._lists.forums):
            return "forum"
        return "other"

    def is_image_file(self, url: str) -> bool:
        """True when the URL path ends in a raster image extension."""
        try:
            path = urlparse(url.strip()).path.lower()
        except ValueError:
            return False
        return path.endswith(self.IMAGE_EXTENSIONS)
