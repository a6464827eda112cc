from fastapi import FastAPI

from repostwatch.api.routes import router
from repostwatch.config.settings import Settings
from repostwatch.history.exporter import ResultExporter
from repostwatch.history.registry import ItemRegistry
from repostwatch.pdf.factory import PdfRendererFactory
from repostwatch.processor.input_loader import InputLoader
from repostwatch.processor.processor import Processor, build_processor


def create_app(
    settings: Settings | None = None,
    processor: Processor | None = None,
    registry: ItemRegistry | None = None,
) -> FastAPI:
    """Build the FastAPI application and wire its collaborators into ``app.state``."""
    settings = settings or Settings()
    processor = processor or build_processor(settings)
    input_loader = processor.input_loader or InputLoader(
        pdf_renderer=PdfRendererFactory.create(settings),
        max_upload_bytes=settings.max_upload_bytes,
    )

    app = FastAPI(title="repostwatch", version="0.1.0")
    app.state.settings = settings
    app.state.processor = processor
    app.state.input_loader = input_loader
    app.state.registry = registry or ItemRegistry()
    app.state.exporter = ResultExporter()
    app.include_router(router)
    return app
