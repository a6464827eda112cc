import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from repostwatch.classification.models import DomainClassification, Judgment
from repostwatch.processor.exceptions import ProcessorError
from repostwatch.search.models import MatchType


class ItemStatus(str, Enum):
    """Lifecycle of one uploaded item."""

    WAITING = "waiting"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (ItemStatus.COMPLETED, ItemStatus.ERROR)


_ALLOWED_TRANSITIONS: dict[ItemStatus, frozenset[ItemStatus]] = {
    ItemStatus.WAITING: frozenset({ItemStatus.PROCESSING, ItemStatus.ERROR}),
    ItemStatus.PROCESSING: frozenset({ItemStatus.COMPLETED, ItemStatus.ERROR}),
    ItemStatus.COMPLETED: frozenset(),
    ItemStatus.ERROR: frozenset(),
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AnalysisRecord:
    """Outcome of analysing one candidate URL."""

    url: str
    domain: str
    classification: DomainClassification
    domain_type: str
    initial_judgment: Judgment
    judgment: Judgment
    reason: str
    match_type: MatchType
    supplement: str | None = None

    @property
    def is_official(self) -> bool:
        return self.classification in (
            DomainClassification.PREMIUM_OFFICIAL,
            DomainClassification.OFFICIAL,
        )


@dataclass(frozen=True)
class ProcessingResult:
    """Overall verdict for one uploaded item."""

    judgment: Judgment
    reason: str
    records: list[AnalysisRecord] = field(default_factory=list)
    timestamp: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class PreparedImage:
    """A raster image ready to be sent to the search service."""

    data: bytes
    media_type: str
    page: int | None = None


@dataclass
class UploadedItem:
    """One uploaded file and its processing state."""

    filename: str
    raw_bytes: bytes
    media_type: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    status: ItemStatus = ItemStatus.WAITING
    result: ProcessingResult | None = None
    created_at: datetime = field(default_factory=utc_now)

    def transition(self, status: ItemStatus) -> None:
        """Move to ``status``; terminal states cannot be left.

        Reaching a terminal state releases ``raw_bytes``; results never need them.
        """
        if status not in _ALLOWED_TRANSITIONS[self.status]:
            raise ProcessorError(
                f"Item {self.id} cannot move from {self.status.value} to {status.value}"
            )
        self.status = status
        if status.is_terminal:
            self.raw_bytes = b""
