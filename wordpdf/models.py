"""
Conversion Models

Key Models:
- UploadedDocument: Word file received from the client (opaque bytes)
- DrawnLine: one row of text placed on a page
- Page: ordered, append-only list of drawn lines
- PageMetrics: fixed page geometry and font used for every conversion

Nothing here is persisted; every instance lives for a single request.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class UploadedDocument:
    filename: str
    mimetype: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class DrawnLine:
    text: str
    x: float
    y: float


@dataclass
class Page:
    index: int
    lines: List[DrawnLine] = field(default_factory=list)

    def add_line(self, text: str, x: float, y: float) -> DrawnLine:
        line = DrawnLine(text=text, x=x, y=y)
        self.lines.append(line)
        return line


@dataclass(frozen=True)
class PageMetrics:
    """US Letter page, Helvetica 12 with 50pt margins."""
    page_width: float = 612.0
    page_height: float = 792.0
    font_name: str = "Helvetica"
    font_size: float = 12.0
    margin: float = 50.0

    @property
    def line_height(self) -> float:
        return self.font_size * 1.2

    @property
    def max_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def top(self) -> float:
        return self.page_height - self.margin

    @property
    def bottom_limit(self) -> float:
        """Lowest baseline that still leaves room for a full line above the margin"""
        return self.margin + self.line_height


DEFAULT_METRICS = PageMetrics()
