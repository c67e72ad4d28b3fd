"""
Paginator Tests

Widths come from a fixed-pitch stand-in: every character is 6 points wide,
so 85 characters fill the 512 point usable width.
"""
import pytest

from wordpdf.models import PageMetrics
from wordpdf.services.layout_service import Paginator, paginate
from wordpdf.utils.errors import EncodingError

CHAR_WIDTH = 6.0


def fixed_pitch(text):
    return len(text) * CHAR_WIDTH


def all_lines(pages):
    return [line for page in pages for line in page.lines]


@pytest.fixture
def metrics():
    return PageMetrics()


class TestMetrics:
    """Fixed page geometry"""

    def test_defaults(self, metrics):
        assert metrics.max_width == 512
        assert metrics.line_height == pytest.approx(14.4)
        assert metrics.top == 742
        assert metrics.bottom_limit == pytest.approx(64.4)


class TestWrapping:
    """Greedy word wrap"""

    def test_short_line_not_split(self):
        """A line narrower than the usable width stays whole"""
        text = 'word ' * 16 + 'end'
        pages = paginate(text, fixed_pitch)
        lines = all_lines(pages)
        assert [line.text for line in lines] == [text]
        assert lines[0].x == 50
        assert lines[0].y == 742

    def test_exact_fit_not_split(self):
        text = 'a' * 85
        assert [line.text for line in all_lines(paginate(text, fixed_pitch))] == [text]

    def test_wraps_at_word_boundary(self):
        first = ' '.join(['abcd'] * 17)          # 84 chars
        text = first + ' overflow'
        lines = all_lines(paginate(text, fixed_pitch))
        assert [line.text for line in lines] == [first, 'overflow']
        assert lines[1].y == pytest.approx(742 - 14.4)

    def test_long_word_alone(self):
        """A word wider than the page sits alone instead of being retried"""
        giant = 'x' * 200
        lines = all_lines(paginate(f'before {giant} after', fixed_pitch))
        assert [line.text for line in lines] == ['before', giant, 'after']

    def test_long_word_first(self):
        giant = 'y' * 120
        lines = all_lines(paginate(giant, fixed_pitch))
        assert [line.text for line in lines] == [giant]

    def test_empty_source_lines_draw_nothing(self):
        lines = all_lines(paginate('one\n\n\ntwo', fixed_pitch))
        assert [line.text for line in lines] == ['one', 'two']
        assert lines[1].y == pytest.approx(742 - 14.4)

    def test_empty_text_has_one_blank_page(self):
        pages = paginate('', fixed_pitch)
        assert len(pages) == 1
        assert pages[0].lines == []


class TestPageBreaks:
    """Vertical cursor and page creation"""

    def test_lines_per_page(self):
        text = '\n'.join(f'line {i}' for i in range(100))
        pages = paginate(text, fixed_pitch)
        assert [len(page.lines) for page in pages] == [48, 48, 4]
        assert [page.index for page in pages] == [0, 1, 2]

    def test_no_line_below_bottom_margin(self, metrics):
        words = ' '.join(['lorem', 'ipsum', 'dolor', 'sit', 'amet'] * 400)
        text = '\n'.join([words] * 3)
        pages = paginate(text, fixed_pitch, metrics)
        assert len(pages) > 1
        for line in all_lines(pages):
            assert line.y >= metrics.bottom_limit - 1e-6
            assert line.y <= metrics.top

    def test_new_page_resets_cursor(self):
        text = '\n'.join(f'row {i}' for i in range(49))
        pages = paginate(text, fixed_pitch)
        assert len(pages) == 2
        assert pages[1].lines[0].text == 'row 48'
        assert pages[1].lines[0].y == 742

    def test_break_after_wrapped_flush(self):
        """Wrapping inside one long source line also starts new pages"""
        text = ' '.join(['abcd'] * 17 * 60)
        pages = paginate(text, fixed_pitch)
        assert [len(page.lines) for page in pages] == [48, 12]


class TestEncodingFailures:
    """Unmeasurable words are dropped"""

    def test_unmeasurable_word_dropped(self):
        def picky(text):
            if 'bad' in text:
                raise EncodingError('no glyph')
            return fixed_pitch(text)

        paginator = Paginator(picky)
        pages = paginator.layout('good bad words')
        assert [line.text for line in all_lines(pages)] == ['good words']
        assert paginator.dropped_words == 1

    def test_other_errors_propagate(self):
        def broken(text):
            raise RuntimeError('boom')

        with pytest.raises(RuntimeError):
            paginate('anything', broken)
