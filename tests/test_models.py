"""
Conversion Model Tests
"""
import pytest
from wordpdf.models import DEFAULT_METRICS, DrawnLine, Page, PageMetrics, UploadedDocument


class TestUploadedDocument:
    """Test UploadedDocument model"""

    def test_size(self):
        """Size should be the byte length"""
        doc = UploadedDocument(filename='a.docx', mimetype='application/msword', data=b'12345')
        assert doc.size == 5


class TestPage:
    """Test Page model"""

    def test_new_page_is_empty(self):
        page = Page(index=0)
        assert page.lines == []

    def test_add_line_appends(self):
        """Lines keep insertion order"""
        page = Page(index=3)
        first = page.add_line('one', 50, 742)
        page.add_line('two', 50, 727.6)

        assert len(page.lines) == 2
        assert first == DrawnLine(text='one', x=50, y=742)
        assert [line.text for line in page.lines] == ['one', 'two']

    def test_pages_do_not_share_lines(self):
        a, b = Page(index=0), Page(index=1)
        a.add_line('only on a', 50, 742)
        assert b.lines == []


class TestPageMetrics:
    """Test fixed page geometry"""

    def test_letter_defaults(self):
        assert DEFAULT_METRICS.page_width == 612
        assert DEFAULT_METRICS.page_height == 792
        assert DEFAULT_METRICS.font_name == 'Helvetica'
        assert DEFAULT_METRICS.font_size == 12
        assert DEFAULT_METRICS.margin == 50

    def test_metrics_are_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_METRICS.margin = 10

    def test_derived_values_follow_font_size(self):
        metrics = PageMetrics(font_size=10)
        assert metrics.line_height == pytest.approx(12)
        assert metrics.bottom_limit == pytest.approx(62)
