import pytest

from repostwatch.pdf.exceptions import PdfRenderError
from repostwatch.pdf.pdfplumber_adapter import PdfPlumberRenderer
from repostwatch.pdf.pymupdf_adapter import PyMuPdfRenderer

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

RENDERERS = [PyMuPdfRenderer, PdfPlumberRenderer]


@pytest.mark.parametrize("renderer_cls", RENDERERS)
class TestRenderers:
    def test_renders_single_page(self, renderer_cls, sample_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        pages = renderer_cls(scale=1.0).render(sample_pdf_bytes)
        assert len(pages) == 1
        assert pages[0].startswith(PNG_SIGNATURE)

    def test_renders_every_page(self, renderer_cls, multi_page_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        pages = renderer_cls(scale=1.0).render(multi_page_pdf_bytes)
        assert len(pages) == 2
        assert all(page.startswith(PNG_SIGNATURE) for page in pages)

    def test_invalid_pdf_raises(self, renderer_cls) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(PdfRenderError, match="rendering failed"):
            renderer_cls().render(b"not a pdf")


def test_scale_increases_resolution(sample_pdf_bytes: bytes) -> None:
    small = PyMuPdfRenderer(scale=1.0).render(sample_pdf_bytes)[0]
    large = PyMuPdfRenderer(scale=2.0).render(sample_pdf_bytes)[0]
    assert len(large) > len(small)
