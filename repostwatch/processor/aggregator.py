from repostwatch.classification.models import Judgment
from repostwatch.processor.models import AnalysisRecord, ProcessingResult

TAINTED_REASON = "Suspicious or unverified links were found."
CLEAR_REASON = "No problematic reposts were detected."


class ResultAggregator:
    """Folds per-URL records into one overall verdict.

    The first ``×`` in candidate order wins and lends its reason. Otherwise
    any ``△`` or ``?`` taints the whole item as ``△``.
    """

    def aggregate(self, records: list[AnalysisRecord]) -> ProcessingResult:
        for record in records:
            if record.judgment is Judgment.VIOLATION:
                return ProcessingResult(
                    judgment=Judgment.VIOLATION,
                    reason=record.reason,
                    records=list(records),
                )
        if any(
            r.judgment in (Judgment.SUSPICIOUS, Judgment.INDETERMINATE) for r in records
        ):
            return ProcessingResult(
                judgment=Judgment.SUSPICIOUS,
                reason=TAINTED_REASON,
                records=list(records),
            )
        return ProcessingResult(judgment=Judgment.CLEAR, reason=CLEAR_REASON, records=list(records))
