from abc import ABC, abstractmethod


class BasePdfRenderer(ABC):
    """Contract for all PDF-to-image rendering adapters."""

    def __init__(self, scale: float = 2.0) -> None:
        self._scale = scale

    @abstractmethod
    def render(self, pdf_bytes: bytes) -> list[bytes]:
        """Render every page of a PDF to a PNG image.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            One PNG-encoded image per page, in page order.

        Raises:
            PdfRenderError: if rendering fails or the PDF has no pages.
        """
