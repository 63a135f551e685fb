"""
Plain-text extraction from uploaded résumé files.
"""
import io
import logging
from pathlib import Path

import pypdf
from docx import Document

logger = logging.getLogger(__name__)

PDF_MIMES = {"application/pdf", "application/x-pdf"}
DOCX_MIMES = {"application/vnd.openxmlformats-officedocument.wordprocessingml.document"}
TEXT_MIMES = {"text/plain"}


class UnsupportedDocumentError(ValueError):
    pass


def _read_pdf(content: bytes) -> str:
    reader = pypdf.PdfReader(io.BytesIO(content))
    pages = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(pages)


def _read_docx(content: bytes) -> str:
    doc = Document(io.BytesIO(content))
    return "\n".join(p.text for p in doc.paragraphs)


def _read_text(content: bytes) -> str:
    return content.decode("utf-8", errors="ignore")


def _detect_kind(filename: str | None, mime_type: str | None) -> str | None:
    # MIME type first, extension as a fallback
    if mime_type in PDF_MIMES:
        return "pdf"
    if mime_type in DOCX_MIMES:
        return "docx"
    if mime_type in TEXT_MIMES:
        return "text"
    suffix = Path(filename or "").suffix.lower()
    return {".pdf": "pdf", ".docx": "docx", ".txt": "text"}.get(suffix)


def extract_resume_text(content: bytes, filename: str | None, mime_type: str | None) -> str:
    """Return the plain text of a PDF, DOCX or TXT résumé."""
    kind = _detect_kind(filename, mime_type)
    if kind is None:
        raise UnsupportedDocumentError("Unsupported file type")

    readers = {"pdf": _read_pdf, "docx": _read_docx, "text": _read_text}
    try:
        return readers[kind](content)
    except Exception as exc:
        logger.warning("Could not read %s as %s: %s", filename, kind, exc)
        raise UnsupportedDocumentError(f"Could not read {kind} file") from exc
