"""Greedy word wrap of plain text into fixed-size pages.

The paginator walks three nested cursors (page, line, word):

- ACCUMULATING_LINE: words are appended to the line candidate while the
  measured width fits the usable page width.
- LINE_FULL: the candidate is flushed as a drawn row and the vertical cursor
  moves down one line height, followed by a page-break check.
- PAGE_FULL: the cursor fell below the bottom margin plus one line height;
  a new page starts and the cursor returns to the top margin.

Width measurement is delegated to a ``measure(text) -> float`` callable so
the PDF library owns the glyph metrics.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from wordpdf.models import DEFAULT_METRICS, Page, PageMetrics
from wordpdf.utils.errors import EncodingError

logger = logging.getLogger(__name__)

Measure = Callable[[str], float]


class Paginator:
    """Lays out text into pages of drawn lines"""

    def __init__(self, measure: Measure, metrics: Optional[PageMetrics] = None):
        self.measure = measure
        self.metrics = metrics or DEFAULT_METRICS
        self.pages: List[Page] = []
        self.y = self.metrics.top
        self.dropped_words = 0

    @property
    def page(self) -> Page:
        return self.pages[-1]

    def _new_page(self) -> None:
        self.pages.append(Page(index=len(self.pages)))
        self.y = self.metrics.top

    def _check_page_break(self) -> None:
        if self.y < self.metrics.bottom_limit:
            self._new_page()

    def _flush(self, text: str) -> None:
        self.page.add_line(text, self.metrics.margin, self.y)
        self.y -= self.metrics.line_height

    def _fits(self, candidate: str) -> bool:
        return self.measure(candidate) <= self.metrics.max_width

    def _wrap_line(self, source_line: str) -> None:
        current = ""
        for word in source_line.split(" "):
            candidate = current + (" " if current else "") + word
            try:
                fits = self._fits(candidate)
            except EncodingError as e:
                self.dropped_words += 1
                logger.debug("Dropped unmeasurable word %r: %s", word, e)
                continue

            if not fits and current:
                self._flush(current)
                current = word
                self._check_page_break()
            else:
                current = candidate

        if current:
            self._flush(current)

    def layout(self, text: str) -> List[Page]:
        """Wrap ``text`` and return the pages; there is always at least one page"""
        self.pages = []
        self.dropped_words = 0
        self._new_page()

        for source_line in (text or "").split("\n"):
            self._check_page_break()
            self._wrap_line(source_line)

        if self.dropped_words:
            logger.info("Layout dropped %d word(s) the page font could not measure", self.dropped_words)
        return self.pages


def paginate(text: str, measure: Measure, metrics: Optional[PageMetrics] = None) -> List[Page]:
    return Paginator(measure, metrics).layout(text)
