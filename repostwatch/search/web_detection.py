"""Normalizes a web-detection payload into a flat candidate list."""

from typing import Any
from urllib.parse import urlparse

from repostwatch.classification.classifier import extract_domain
from repostwatch.search.models import CandidateUrl, MatchType


def _urls(entries: Any) -> list[str]:
    if not isinstance(entries, list):
        return []
    urls: list[str] = []
    for entry in entries:
        if isinstance(entry, dict):
            url = entry.get("url")
            if isinstance(url, str) and url.strip():
                urls.append(url.strip())
    return urls


def looks_like_text_search(url: str, patterns: list[str]) -> bool:
    """Best-effort check for result pages produced by a keyword search."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    target = parsed.path.lower()
    if parsed.query:
        target = f"{target}?{parsed.query.lower()}"
    return any(pattern in target for pattern in patterns)


def collect_candidates(
    web_detection: dict[str, Any],
    *,
    related_threshold: int = 5,
    text_search_patterns: list[str] | None = None,
) -> list[CandidateUrl]:
    """Merge full, partial and (when sparse) page matches.

    Full and partial matches are deduplicated in first-seen order. Pages with
    matching images are only consulted while fewer than ``related_threshold``
    distinct URLs were found, and pages that look like text-search results
    are dropped when ``text_search_patterns`` is given.
    """
    seen: set[str] = set()
    candidates: list[CandidateUrl] = []

    def add(url: str, match_type: MatchType) -> None:
        if url in seen:
            return
        seen.add(url)
        candidates.append(CandidateUrl(url=url, domain=extract_domain(url), match_type=match_type))

    for url in _urls(web_detection.get("fullMatchingImages")):
        add(url, MatchType.EXACT)
    for url in _urls(web_detection.get("partialMatchingImages")):
        add(url, MatchType.PARTIAL)

    if len(candidates) < related_threshold:
        patterns = text_search_patterns or []
        for url in _urls(web_detection.get("pagesWithMatchingImages")):
            if patterns and looks_like_text_search(url, patterns):
                continue
            add(url, MatchType.RELATED)

    return candidates
