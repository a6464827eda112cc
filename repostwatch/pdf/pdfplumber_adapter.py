import io

import pdfplumber

from repostwatch.pdf.base import BasePdfRenderer
from repostwatch.pdf.exceptions import PdfRenderError

_BASE_DPI = 72


class PdfPlumberRenderer(BasePdfRenderer):
    """Renders PDF pages to PNG using pdfplumber's page images."""

    def render(self, pdf_bytes: bytes) -> list[bytes]:
        resolution = int(_BASE_DPI * self._scale)
        try:
            images: list[bytes] = []
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                for page in pdf.pages:
                    buf = io.BytesIO()
                    page.to_image(resolution=resolution).original.save(buf, format="PNG")
                    images.append(buf.getvalue())
        except Exception as exc:
            raise PdfRenderError(f"pdfplumber rendering failed: {exc}") from exc
        if not images:
            raise PdfRenderError("PDF contains no pages")
        return images
