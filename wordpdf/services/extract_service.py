"""Upload validation and Word text extraction.

Document parsing is left to mammoth; only the declared media type is checked here.
"""
from __future__ import annotations

import io
import logging
from typing import Optional

import mammoth

from wordpdf.models import UploadedDocument
from wordpdf.utils.errors import InputValidationError

logger = logging.getLogger(__name__)

ACCEPTED_MIME_MARKERS = (
    "officedocument.wordprocessingml.document",
    "msword",
)

NO_FILE_MESSAGE = "No file provided"
INVALID_TYPE_MESSAGE = "Invalid file type. Please upload a Word document."


def is_word_mimetype(mimetype: Optional[str]) -> bool:
    mimetype = mimetype or ""
    return any(marker in mimetype for marker in ACCEPTED_MIME_MARKERS)


def load_upload(file_storage) -> UploadedDocument:
    """Validate a werkzeug FileStorage and read it into memory"""
    if file_storage is None or not (getattr(file_storage, "filename", "") or "").strip():
        raise InputValidationError(NO_FILE_MESSAGE)

    mimetype = getattr(file_storage, "mimetype", "") or ""
    if not is_word_mimetype(mimetype):
        raise InputValidationError(INVALID_TYPE_MESSAGE)

    return UploadedDocument(
        filename=file_storage.filename,
        mimetype=mimetype,
        data=file_storage.read(),
    )


def extract_text(document: UploadedDocument) -> str:
    """Return the raw text of a Word document, paragraphs separated by newlines"""
    result = mammoth.extract_raw_text(io.BytesIO(document.data))
    for message in result.messages:
        logger.debug("mammoth %s: %s", getattr(message, "type", "message"), getattr(message, "message", message))
    return result.value or ""
