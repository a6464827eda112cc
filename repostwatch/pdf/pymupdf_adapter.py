import pymupdf

from repostwatch.pdf.base import BasePdfRenderer
from repostwatch.pdf.exceptions import PdfRenderError


class PyMuPdfRenderer(BasePdfRenderer):
    """Renders PDF pages to PNG using PyMuPDF."""

    def render(self, pdf_bytes: bytes) -> list[bytes]:
        try:
            matrix = pymupdf.Matrix(self._scale, self._scale)
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                images = [page.get_pixmap(matrix=matrix).tobytes("png") for page in doc]
        except Exception as exc:
            raise PdfRenderError(f"pymupdf rendering failed: {exc}") from exc
        if not images:
            raise PdfRenderError("PDF contains no pages")
        return images
