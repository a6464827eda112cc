from typing import ClassVar

from repostwatch.logging.logger import Log
from repostwatch.pdf.base import BasePdfRenderer
from repostwatch.processor.exceptions import (
    EmptyInputError,
    InputTooLargeError,
    UnsupportedInputError,
)
from repostwatch.processor.models import PreparedImage, UploadedItem

PDF_MEDIA_TYPE = "application/pdf"


class InputLoader:
    """Validates uploads and turns them into raster images for searching."""

    IMAGE_MEDIA_TYPES: ClassVar[frozenset[str]] = frozenset(
        {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}
    )

    def __init__(self, pdf_renderer: BasePdfRenderer, max_upload_bytes: int) -> None:
        self._pdf_renderer = pdf_renderer
        self._max_upload_bytes = max_upload_bytes

    @property
    def max_upload_bytes(self) -> int:
        return self._max_upload_bytes

    def validate(self, media_type: str, data: bytes) -> None:
        """Reject unsupported uploads before any state is created.

        Raises:
            UnsupportedInputError: if the media type is not an allowed raster type or PDF.
            EmptyInputError: if the upload is empty.
            InputTooLargeError: if the upload exceeds the size limit.
        """
        normalized = (media_type or "").lower()
        if normalized not in self.IMAGE_MEDIA_TYPES and normalized != PDF_MEDIA_TYPE:
            raise UnsupportedInputError(f"Unsupported file type: {media_type or 'unknown'}")
        if not data:
            raise EmptyInputError("The uploaded file is empty")
        if len(data) > self._max_upload_bytes:
            raise InputTooLargeError(
                f"The uploaded file exceeds the limit of {self._max_upload_bytes} bytes"
            )

    def prepare(self, item: UploadedItem) -> list[PreparedImage]:
        """Return the images to search for ``item``.

        Raster uploads pass through unchanged; PDFs are rendered page by page.

        Raises:
            PdfRenderError: if a PDF cannot be rendered.
        """
        self.validate(item.media_type, item.raw_bytes)
        media_type = item.media_type.lower()
        if media_type != PDF_MEDIA_TYPE:
            return [PreparedImage(data=item.raw_bytes, media_type=media_type)]

        pages = self._pdf_renderer.render(item.raw_bytes)
        Log.info(f"Rendered {len(pages)} PDF pages", item_id=item.id)
        return [
            PreparedImage(data=page, media_type="image/png", page=index + 1)
            for index, page in enumerate(pages)
        ]
