"""
API Blueprint - Word document to PDF conversion

POST /api/convert takes a multipart upload in the ``file`` field and answers
with the PDF as an attachment, or as base64 JSON when ``?format=json`` is set.
"""
import base64
import re
from urllib.parse import quote

from flask import Blueprint, Response, current_app, jsonify, request

from wordpdf.services.extract_service import extract_text, load_upload
from wordpdf.services.pdf_service import convert_text_to_pdf
from wordpdf.services.sanitize_service import sanitize_text
from wordpdf.utils.errors import InputValidationError

api_bp = Blueprint('api', __name__)

WORD_EXTENSION = re.compile(r"\.docx?$", re.IGNORECASE)

CONVERT_FAILED_MESSAGE = "Failed to convert document"


# ============ Helper Functions ============

def pdf_filename(upload_name: str) -> str:
    """Swap a trailing .doc/.docx for .pdf; other names get .pdf appended"""
    name = (upload_name or "").strip() or "document"
    if WORD_EXTENSION.search(name):
        return WORD_EXTENSION.sub(".pdf", name)
    if name.lower().endswith(".pdf"):
        return name
    return name + ".pdf"


def content_disposition(filename: str) -> str:
    ascii_name = sanitize_text(filename).encode("ascii", "replace").decode("ascii")
    ascii_name = ascii_name.replace("\\", "\\\\").replace('"', '\\"')
    header = f'attachment; filename="{ascii_name}"'
    if not filename.isascii():
        header += f"; filename*=UTF-8''{quote(filename)}"
    return header


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def convert_upload(file_storage):
    """Run the extract, sanitize and render pipeline for one upload"""
    document = load_upload(file_storage)
    current_app.logger.info("Converting %s (%s, %d bytes)", document.filename, document.mimetype, document.size)

    text = extract_text(document)
    text = sanitize_text(text, verbose=current_app.config.get("SANITIZE_VERBOSE", False))

    filename = pdf_filename(document.filename)
    pdf_bytes = convert_text_to_pdf(text, title=filename)
    return filename, pdf_bytes


# ============ API Routes ============

@api_bp.route("/api/convert", methods=["POST"])
def convert():
    upload = request.files.get("file")  # 413 is raised here for oversized bodies
    try:
        filename, pdf_bytes = convert_upload(upload)
    except InputValidationError as e:
        return error_response(e.message, e.status_code)
    except Exception:
        current_app.logger.exception("Conversion error")
        return error_response(CONVERT_FAILED_MESSAGE, 500)

    if (request.args.get("format") or "").strip().lower() == "json":
        return jsonify({
            "success": True,
            "filename": filename,
            "pdf": base64.b64encode(pdf_bytes).decode("ascii"),
        }), 200

    return Response(
        pdf_bytes,
        status=200,
        mimetype="application/pdf",
        headers={"Content-Disposition": content_disposition(filename)},
    )
