import io

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from repostwatch.classification.classifier import DomainClassifier
from repostwatch.classification.lists import DomainLists


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Chapter 1 preview")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    """A small solid-colour PNG."""
    buf = io.BytesIO()
    Image.new("RGB", (8, 8), color=(200, 30, 30)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def domain_lists() -> DomainLists:
    return DomainLists(
        premium_official=["jumpplus.shueisha.co.jp"],
        publishers=["shueisha.co.jp", "kodansha.co.jp"],
        legitimate_sellers=["amazon.co.jp"],
        social_media=["x.com", "twitter.com", "instagram.com", "tiktok.com"],
        suspicious=["5ch.net", "manga-raw", "shueisha-raw"],
        image_share=["imgur.com"],
        unofficial_viewers=["manga-raw"],
        art_sites=["pixiv.net"],
        forums=["5ch.net"],
        text_search_patterns=["/search", "?q="],
        illegal_keywords=["free download", "torrent"],
    )


@pytest.fixture()
def classifier(domain_lists: DomainLists) -> DomainClassifier:
    return DomainClassifier(domain_lists)
