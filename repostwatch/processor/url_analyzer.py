"""Per-candidate decision sequence."""

from repostwatch.classification.classifier import DomainClassifier
from repostwatch.classification.models import DomainClassification, Judgment
from repostwatch.classification.social import extract_social_info
from repostwatch.judgment.base import BaseJudgmentGateway
from repostwatch.logging.logger import Log
from repostwatch.processor.models import AnalysisRecord, PreparedImage
from repostwatch.search.models import CandidateUrl

IMAGE_FILE_REASON = "Direct image file; page content cannot be analysed"


class UrlAnalyzer:
    """Classifies one candidate and, when needed, asks for a generative judgment.

    Direct image files (on any domain, checked first) and official domains are
    decided locally. Every other candidate may first be compared against the
    uploaded image; a ``different`` comparison clears it without a content
    judgment.
    """

    def __init__(
        self,
        classifier: DomainClassifier,
        judgment_gateway: BaseJudgmentGateway,
        compare_images: bool = True,
    ) -> None:
        self._classifier = classifier
        self._judgment_gateway = judgment_gateway
        self._compare_images = compare_images

    async def analyze(self, candidate: CandidateUrl, original: PreparedImage) -> AnalysisRecord:
        classification = self._classifier.classify(candidate.url)
        initial = self._classifier.initial_judgment_for(candidate.url)
        domain_type = self._classifier.domain_type(candidate.domain)

        def record(judgment: Judgment, reason: str, supplement: str | None = None) -> AnalysisRecord:
            Log.info(
                f"Candidate judged {judgment.value}",
                url=candidate.url,
                classification=classification.value,
            )
            return AnalysisRecord(
                url=candidate.url,
                domain=candidate.domain,
                classification=classification,
                domain_type=domain_type,
                initial_judgment=initial,
                judgment=judgment,
                reason=reason,
                match_type=candidate.match_type,
                supplement=supplement,
            )

        if self._classifier.is_image_file(candidate.url):
            return record(Judgment.INDETERMINATE, IMAGE_FILE_REASON)
        if classification is DomainClassification.PREMIUM_OFFICIAL:
            return record(
                Judgment.CLEAR,
                f"Registered as a premium official site ({candidate.domain})",
            )
        if classification is DomainClassification.OFFICIAL:
            return record(Judgment.CLEAR, f"Confirmed on an official domain ({candidate.domain})")

        if self._compare_images:
            comparison = await self._judgment_gateway.compare_images(
                original.data, candidate.url, original.media_type
            )
            if not comparison.should_analyze_further:
                return record(
                    Judgment.CLEAR,
                    f"The image differs from the original: {comparison.reason}",
                )

        is_social = classification is DomainClassification.SNS
        judgment = await self._judgment_gateway.judge_content(
            candidate.url,
            is_social=is_social,
            social=extract_social_info(candidate.url) if is_social else None,
            domain_type=domain_type,
        )
        return record(judgment.judgment, judgment.reason, judgment.supplement)
