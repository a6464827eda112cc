from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from repostwatch.processor.models import (
    AnalysisRecord,
    PreparedImage,
    ProcessingResult,
    UploadedItem,
)
from repostwatch.search.models import SearchResult


@dataclass(slots=True)
class PipelineContext:
    item: UploadedItem
    images: list[PreparedImage] = field(default_factory=list)
    search_result: SearchResult | None = None
    records: list[AnalysisRecord] = field(default_factory=list)
    result: ProcessingResult | None = None
    error_message: str = ""

    @property
    def finished(self) -> bool:
        return self.result is not None


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
