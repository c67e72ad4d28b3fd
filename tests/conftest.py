"""
Test Configuration and Fixtures
"""
import io
import pytest
from docx import Document
from wordpdf import create_app

DOCX_MIME = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'
DOC_MIME = 'application/msword'


@pytest.fixture(scope='session')
def app():
    """Create application for testing"""
    app = create_app('testing')
    app.config['TESTING'] = True
    yield app


@pytest.fixture(scope='function')
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture(scope='session')
def make_docx():
    """Build an in-memory .docx with one paragraph per string"""
    def _make(*paragraphs):
        doc = Document()
        for text in paragraphs:
            doc.add_paragraph(text)
        buf = io.BytesIO()
        doc.save(buf)
        return buf.getvalue()
    return _make


@pytest.fixture(scope='function')
def upload(make_docx):
    """Build the multipart payload for /api/convert"""
    def _upload(*paragraphs, filename='report.docx', mimetype=DOCX_MIME, data=None):
        if data is None:
            data = make_docx(*paragraphs)
        return {'file': (io.BytesIO(data), filename, mimetype)}
    return _upload
