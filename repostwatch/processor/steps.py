import asyncio

from repostwatch.classification.models import Judgment
from repostwatch.logging.logger import Log
from repostwatch.processor.aggregator import ResultAggregator
from repostwatch.processor.input_loader import InputLoader
from repostwatch.processor.models import AnalysisRecord, ItemStatus, ProcessingResult
from repostwatch.processor.pipeline import PipelineContext, PipelineStep
from repostwatch.processor.url_analyzer import UrlAnalyzer
from repostwatch.search.base import BaseImageSearchGateway
from repostwatch.search.exceptions import SearchError
from repostwatch.search.models import CandidateUrl, MatchType

NO_MATCHES_REASON = "No matching images were found."


class MarkProcessingStep(PipelineStep):
    async def run(self, context: PipelineContext) -> PipelineContext:
        context.item.transition(ItemStatus.PROCESSING)
        Log.info(f"Item {context.item.id} marked as processing")
        return context


class MarkCompletedStep(PipelineStep):
    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.result is None:
            raise ValueError("PipelineContext.result must be set before completion")
        context.item.transition(ItemStatus.COMPLETED)
        context.item.result = context.result
        Log.info(
            f"Item {context.item.id} completed with {context.result.judgment.value}",
            records=len(context.result.records),
        )
        return context


class MarkFailedStep(PipelineStep):
    def __init__(self, error_judgment: Judgment = Judgment.INDETERMINATE) -> None:
        self._error_judgment = error_judgment

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.result = ProcessingResult(
            judgment=self._error_judgment,
            reason=f"An error occurred: {context.error_message}",
        )
        context.item.transition(ItemStatus.ERROR)
        context.item.result = context.result
        Log.error(f"Item {context.item.id} marked as failed: {context.error_message}")
        return context


class PrepareImagesStep(PipelineStep):
    def __init__(self, input_loader: InputLoader) -> None:
        self._input_loader = input_loader

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.images = self._input_loader.prepare(context.item)
        Log.info(f"Prepared {len(context.images)} images for item {context.item.id}")
        return context


class SearchStep(PipelineStep):
    def __init__(
        self,
        search_gateway: BaseImageSearchGateway,
        no_match_judgment: Judgment = Judgment.INDETERMINATE,
    ) -> None:
        self._search_gateway = search_gateway
        self._no_match_judgment = no_match_judgment

    async def run(self, context: PipelineContext) -> PipelineContext:
        if not context.images:
            raise ValueError("PipelineContext.images must be set before searching")
        result = await self._search_gateway.search(context.images[0].data)
        context.search_result = result
        if result.failed:
            raise SearchError(result.error)
        if not result.candidates:
            context.result = ProcessingResult(
                judgment=self._no_match_judgment,
                reason=result.message or NO_MATCHES_REASON,
            )
            Log.info(f"No candidates found for item {context.item.id}")
            return context
        Log.info(
            f"Found {len(result.candidates)} candidates for item {context.item.id}",
            exact=result.count(MatchType.EXACT),
            partial=result.count(MatchType.PARTIAL),
            related=result.count(MatchType.RELATED),
        )
        return context


class AnalyzeUrlsStep(PipelineStep):
    """Analyses every candidate concurrently and waits for all of them.

    Fan-out is unbounded unless ``max_concurrency`` is given.
    """

    def __init__(self, url_analyzer: UrlAnalyzer, max_concurrency: int | None = None) -> None:
        self._url_analyzer = url_analyzer
        self._max_concurrency = max_concurrency

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.search_result is None or not context.images:
            raise ValueError("PipelineContext.search_result must be set before analysis")
        original = context.images[0]
        semaphore = (
            asyncio.Semaphore(self._max_concurrency) if self._max_concurrency else None
        )

        async def analyze(candidate: CandidateUrl) -> AnalysisRecord:
            if semaphore is None:
                return await self._url_analyzer.analyze(candidate, original)
            async with semaphore:
                return await self._url_analyzer.analyze(candidate, original)

        records = await asyncio.gather(
            *(analyze(c) for c in context.search_result.candidates)
        )
        context.records = list(records)
        return context


class AggregateStep(PipelineStep):
    def __init__(self, aggregator: ResultAggregator) -> None:
        self._aggregator = aggregator

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.result = self._aggregator.aggregate(context.records)
        Log.info(
            f"Aggregated item {context.item.id}: {context.result.judgment.value}",
            records=len(context.records),
        )
        return context
