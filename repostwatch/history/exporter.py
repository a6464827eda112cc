"""JSON export of the processing history.

The document mirrors the in-memory shapes directly and carries no version
field.
"""

import json
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

from repostwatch.classification.models import DomainClassification, Judgment
from repostwatch.processor.models import (
    AnalysisRecord,
    ItemStatus,
    ProcessingResult,
    UploadedItem,
)
from repostwatch.search.models import MatchType


@dataclass(frozen=True)
class HistoryEntry:
    """One exported item restored from JSON."""

    id: str
    filename: str
    media_type: str
    status: ItemStatus
    result: ProcessingResult | None


class ResultExporter:
    """Converts items to a JSON document and back."""

    def export(self, items: list[UploadedItem]) -> str:
        return json.dumps(
            [self.item_to_dict(item) for item in items],
            ensure_ascii=False,
            indent=2,
        )

    def load(self, document: str) -> list[HistoryEntry]:
        """Restore entries from a document produced by :meth:`export`.

        Raises:
            ValueError: if the document is not a list of exported items.
        """
        data = json.loads(document)
        if not isinstance(data, list):
            raise ValueError("History export must be a JSON list")
        return [self._entry_from_dict(raw) for raw in data]

    def item_to_dict(self, item: UploadedItem) -> dict[str, Any]:
        return {
            "id": item.id,
            "filename": item.filename,
            "media_type": item.media_type,
            "status": item.status.value,
            "created_at": item.created_at.isoformat(),
            "result": self._result_to_dict(item.result) if item.result else None,
        }

    def _result_to_dict(self, result: ProcessingResult) -> dict[str, Any]:
        return {
            "judgment": result.judgment.value,
            "reason": result.reason,
            "timestamp": result.timestamp.isoformat(),
            "records": [self._record_to_dict(r) for r in result.records],
        }

    @staticmethod
    def _record_to_dict(record: AnalysisRecord) -> dict[str, Any]:
        data = asdict(record)
        for key in ("classification", "initial_judgment", "judgment", "match_type"):
            data[key] = data[key].value
        data["is_official"] = record.is_official
        return data

    def _entry_from_dict(self, raw: dict[str, Any]) -> HistoryEntry:
        result_raw = raw.get("result")
        return HistoryEntry(
            id=raw["id"],
            filename=raw.get("filename", ""),
            media_type=raw.get("media_type", ""),
            status=ItemStatus(raw["status"]),
            result=self._result_from_dict(result_raw) if result_raw else None,
        )

    @staticmethod
    def _result_from_dict(raw: dict[str, Any]) -> ProcessingResult:
        records = [
            AnalysisRecord(
                url=r["url"],
                domain=r["domain"],
                classification=DomainClassification(r["classification"]),
                domain_type=r.get("domain_type", "other"),
                initial_judgment=Judgment(r["initial_judgment"]),
                judgment=Judgment(r["judgment"]),
                reason=r["reason"],
                match_type=MatchType(r["match_type"]),
                supplement=r.get("supplement"),
            )
            for r in raw.get("records", [])
        ]
        return ProcessingResult(
            judgment=Judgment(raw["judgment"]),
            reason=raw["reason"],
            records=records,
            timestamp=datetime.fromisoformat(raw["timestamp"]),
        )
