from repostwatch.classification.classifier import DomainClassifier
from repostwatch.classification.lists import DomainLists
from repostwatch.classification.models import Judgment
from repostwatch.config.settings import Settings
from repostwatch.judgment.factory import JudgmentGatewayFactory
from repostwatch.logging.logger import Log
from repostwatch.pdf.factory import PdfRendererFactory
from repostwatch.processor.aggregator import ResultAggregator
from repostwatch.processor.input_loader import InputLoader
from repostwatch.processor.models import ProcessingResult, UploadedItem
from repostwatch.processor.pipeline import PipelineContext, PipelineStep
from repostwatch.processor.steps import (
    AggregateStep,
    AnalyzeUrlsStep,
    MarkCompletedStep,
    MarkFailedStep,
    MarkProcessingStep,
    PrepareImagesStep,
    SearchStep,
)
from repostwatch.processor.url_analyzer import UrlAnalyzer
from repostwatch.search.factory import SearchGatewayFactory


class Processor:
    """Orchestrates the analysis pipeline for one uploaded item.

    Pipeline: mark processing -> prepare images -> search -> analyze URLs ->
    aggregate -> mark completed. A step may finish the item early by setting
    ``context.result``; any exception routes to the failed step instead.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        completed_step: PipelineStep,
        failed_step: PipelineStep,
        input_loader: InputLoader | None = None,
    ) -> None:
        self._steps = steps
        self._completed_step = completed_step
        self._failed_step = failed_step
        self.input_loader = input_loader

    async def process(self, item: UploadedItem) -> ProcessingResult:
        """Run the pipeline and return the item's single ProcessingResult."""
        Log.info(f"Processing item {item.id} ({item.filename}, {item.media_type})")
        context = PipelineContext(item=item)
        try:
            for step in self._steps:
                context = await step.run(context)
                if context.finished:
                    break
            context = await self._completed_step.run(context)
        except Exception as exc:
            context.error_message = str(exc) or type(exc).__name__
            context = await self._failed_step.run(context)
        if context.result is None:
            raise RuntimeError(f"Item {item.id} finished without a result")
        return context.result


def build_processor(settings: Settings, lists: DomainLists | None = None) -> Processor:
    """Build a Processor with all required adapters."""
    lists = lists or DomainLists.from_file(settings.domain_lists_path)
    classifier = DomainClassifier(lists)
    input_loader = InputLoader(
        pdf_renderer=PdfRendererFactory.create(settings),
        max_upload_bytes=settings.max_upload_bytes,
    )
    search_gateway = SearchGatewayFactory.create(settings, lists)
    judgment_gateway = JudgmentGatewayFactory.create(settings, lists)
    url_analyzer = UrlAnalyzer(
        classifier=classifier,
        judgment_gateway=judgment_gateway,
        compare_images=settings.compare_images_enabled,
    )
    steps: list[PipelineStep] = [
        MarkProcessingStep(),
        PrepareImagesStep(input_loader),
        SearchStep(search_gateway, no_match_judgment=Judgment(settings.no_match_judgment)),
        AnalyzeUrlsStep(url_analyzer, max_concurrency=settings.max_concurrent_judgments),
        AggregateStep(ResultAggregator()),
    ]
    return Processor(
        steps=steps,
        completed_step=MarkCompletedStep(),
        failed_step=MarkFailedStep(error_judgment=Judgment(settings.error_judgment)),
        input_loader=input_loader,
    )
