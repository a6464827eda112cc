from repostwatch.config.settings import Settings
from repostwatch.pdf.base import BasePdfRenderer
from repostwatch.pdf.pdfplumber_adapter import PdfPlumberRenderer
from repostwatch.pdf.pymupdf_adapter import PyMuPdfRenderer


class PdfRendererFactory:
    """Creates the correct PDF renderer based on settings."""

    ADAPTERS: dict[str, type[BasePdfRenderer]] = {
        "pdfplumber": PdfPlumberRenderer,
        "pymupdf": PyMuPdfRenderer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfRenderer:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls(scale=settings.pdf_render_scale)
