"""
Document text extraction.

The recognizer only needs a searchable text layer, so these helpers
return plain strings without preserving layout.  PDF is the primary
format; DOCX, HTML and plain text files are accepted by
:func:`extract_text_from_file` for résumés and job descriptions that do
not arrive as PDFs.
"""

from __future__ import annotations

import io
import logging
import os

import docx  # type: ignore
import pdfplumber  # type: ignore
from bs4 import BeautifulSoup

from ..errors import ExtractionError

logger = logging.getLogger(__name__)

PDF_EXTENSIONS = {".pdf"}
DOCX_EXTENSIONS = {".docx"}
HTML_EXTENSIONS = {".html", ".htm"}
TEXT_EXTENSIONS = {".txt", ".md"}


def extract_text(document: bytes) -> str:
    """Return the text layer of a PDF document.

    Page texts are joined with newlines.  Pages without a text layer
    contribute an empty line.

    Args:
        document: Raw PDF bytes.

    Returns:
        The extracted text.

    Raises:
        ExtractionError: If the bytes are not a readable PDF, the
            document is encrypted, or it has no pages.
    """
    if not document:
        raise ExtractionError("Failed to parse PDF file: document is empty")
    try:
        with pdfplumber.open(io.BytesIO(document)) as pdf:
            if not pdf.pages:
                raise ExtractionError("Failed to parse PDF file: document has no pages")
            text = ""
            for page in pdf.pages:
                page_text = page.extract_text() or ""
                text += page_text + "\n"
    except ExtractionError:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.debug("pdfplumber could not read document: %s", exc)
        raise ExtractionError(f"Failed to parse PDF file: {exc}") from exc
    logger.debug("Extracted %d characters from PDF", len(text))
    return text


def _extract_docx(file_path: str) -> str:
    try:
        document = docx.Document(file_path)
    except Exception as exc:  # noqa: BLE001
        raise ExtractionError(f"Failed to parse Word document {file_path}: {exc}") from exc
    return "\n".join(p.text for p in document.paragraphs)


def _extract_html(file_path: str) -> str:
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        html = f.read()
    soup = BeautifulSoup(html, "html.parser")
    return soup.get_text(separator="\n", strip=True)


def extract_text_from_file(file_path: str) -> str:
    """Extract text from a document on disk.

    The format is chosen from the file extension.  PDFs go through
    :func:`extract_text`, Word documents through python-docx, HTML
    through BeautifulSoup and ``.txt``/``.md`` files are read as UTF-8.

    Args:
        file_path: Path to the document.

    Returns:
        A single string containing the extracted text.

    Raises:
        FileNotFoundError: If the file does not exist.
        ExtractionError: If the extension is unsupported or the
            document cannot be parsed.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")
    ext = os.path.splitext(file_path)[1].lower()
    if ext in PDF_EXTENSIONS:
        with open(file_path, "rb") as f:
            data = f.read()
        return extract_text(data)
    if ext in DOCX_EXTENSIONS:
        return _extract_docx(file_path)
    if ext in HTML_EXTENSIONS:
        return _extract_html(file_path)
    if ext in TEXT_EXTENSIONS:
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"Failed to decode {file_path} as UTF-8: {exc}") from exc
    raise ExtractionError(f"Unsupported document format: {ext or file_path}")
