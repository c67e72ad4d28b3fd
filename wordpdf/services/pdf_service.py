"""PDF rendering with reportlab.

Glyph metrics, drawing and serialization all belong to reportlab; this module
only places the rows produced by the paginator.
"""
from __future__ import annotations

import io
import logging
from typing import List, Optional

from reportlab.lib import colors
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from wordpdf.models import DEFAULT_METRICS, DrawnLine, Page, PageMetrics
from wordpdf.services.layout_service import paginate
from wordpdf.utils.errors import EncodingError

logger = logging.getLogger(__name__)

_FONT_ERRORS = (UnicodeError, ValueError, KeyError, TypeError)


def measure_text(text: str, metrics: Optional[PageMetrics] = None) -> float:
    """Rendered width of ``text`` in points at the page font and size"""
    metrics = metrics or DEFAULT_METRICS
    try:
        return stringWidth(text, metrics.font_name, metrics.font_size)
    except _FONT_ERRORS as e:
        raise EncodingError(f"cannot measure {text!r}: {e}") from e


def _draw_line(c: canvas.Canvas, line: DrawnLine) -> None:
    try:
        c.drawString(line.x, line.y, line.text)
    except _FONT_ERRORS as e:
        raise EncodingError(f"cannot draw {line.text!r}: {e}") from e


def render_pages(pages: List[Page], title: str = "", metrics: Optional[PageMetrics] = None) -> bytes:
    """Draw laid-out pages onto a reportlab canvas and return the PDF bytes.

    A line the font cannot draw is skipped; the rest of the document is kept.
    """
    metrics = metrics or DEFAULT_METRICS
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=(metrics.page_width, metrics.page_height))
    if title:
        c.setTitle(title)
    c.setCreator("wordpdf")

    dropped = 0
    for page in pages or [Page(index=0)]:
        c.setFont(metrics.font_name, metrics.font_size)
        c.setFillColor(colors.black)
        for line in page.lines:
            try:
                _draw_line(c, line)
            except EncodingError as e:
                dropped += 1
                logger.warning("Skipped line on page %d: %s", page.index + 1, e)
        c.showPage()

    c.save()
    if dropped:
        logger.info("Rendered %d page(s), %d line(s) skipped", len(pages), dropped)
    return buf.getvalue()


def convert_text_to_pdf(text: str, title: str = "", metrics: Optional[PageMetrics] = None) -> bytes:
    """Wrap sanitized text into pages and render them"""
    metrics = metrics or DEFAULT_METRICS
    pages = paginate(text, lambda s: measure_text(s, metrics), metrics)
    logger.debug("Laid out %d page(s)", len(pages))
    return render_pages(pages, title=title, metrics=metrics)
