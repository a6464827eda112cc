"""Labelled-line extraction from free-text generative replies.

Replies are not trusted to be well formed: a missing label never raises, it
falls back to a fixed value instead.
"""

import re

from repostwatch.classification.models import Judgment
from repostwatch.judgment.models import ContentJudgment, ImageComparison, Similarity

MISSING_REASON = "Could not obtain a reason for the judgment."
MISSING_COMPARISON_REASON = "Could not obtain a reason for the image comparison."

_VERDICT_RE = re.compile(r"^\W*(?:verdict|判定)\W*?[:：][ \t*\[]*(\S)", re.IGNORECASE | re.MULTILINE)
_COMMENT_RE = re.compile(r"^\W*(?:comment|reason|理由)\W*?[:：][ \t*]*(.+)$", re.IGNORECASE | re.MULTILINE)
_SUPPLEMENT_RE = re.compile(r"^\W*(?:supplement|補足)\W*?[:：][ \t*]*(.+)$", re.IGNORECASE | re.MULTILINE)
_SIMILARITY_RE = re.compile(r"^\W*(?:similarity|類似度)\W*?[:：][ \t*\[]*(\w+)", re.IGNORECASE | re.MULTILINE)

_VERDICT_SYMBOLS = {
    "○": Judgment.CLEAR,
    "〇": Judgment.CLEAR,
    "△": Judgment.SUSPICIOUS,
    "×": Judgment.VIOLATION,
    "✕": Judgment.VIOLATION,
    "?": Judgment.INDETERMINATE,
    "？": Judgment.INDETERMINATE,
}

_SIMILARITY_WORDS = {
    "identical": Similarity.IDENTICAL,
    "同一": Similarity.IDENTICAL,
    "similar": Similarity.SIMILAR,
    "類似": Similarity.SIMILAR,
    "different": Similarity.DIFFERENT,
    "異なる": Similarity.DIFFERENT,
}


def _field(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    if match is None:
        return None
    value = match.group(1).strip().strip("[]").strip()
    return value or None


class ReplyParser:
    """Turns a generative reply into a ContentJudgment or ImageComparison."""

    def parse_judgment(self, text: str | None) -> ContentJudgment:
        text = text or ""
        symbol = _field(_VERDICT_RE, text)
        judgment = _VERDICT_SYMBOLS.get(symbol or "", Judgment.INDETERMINATE)
        reason = _field(_COMMENT_RE, text) or MISSING_REASON
        supplement = _field(_SUPPLEMENT_RE, text)
        return ContentJudgment(judgment=judgment, reason=reason, supplement=supplement)

    def parse_similarity(self, text: str | None) -> ImageComparison:
        text = text or ""
        word = (_field(_SIMILARITY_RE, text) or "").lower()
        similarity = _SIMILARITY_WORDS.get(word, Similarity.SIMILAR)
        reason = _field(_COMMENT_RE, text) or MISSING_COMPARISON_REASON
        return ImageComparison(similarity=similarity, reason=reason)
