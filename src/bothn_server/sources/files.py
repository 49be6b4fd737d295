"""
File Document Sources

Turns uploaded files into plain text for the extraction session. Parsers
are registered per file extension; only registered formats are accepted.

Supported formats
-----------------
- .txt   UTF-8 text (undecodable bytes are replaced)
- .docx  paragraph and table text via python-docx
- .xlsx  every worksheet via openpyxl, one line per row, cells joined by
         single spaces
"""

from __future__ import annotations

import io
import logging
from pathlib import PurePath
from typing import Callable, Dict, List, Optional

import docx
from openpyxl import load_workbook

from ..core.errors import DocumentSourceError, DocumentTooLargeError, UnsupportedDocumentError

logger = logging.getLogger("bothn.sources")


Extractor = Callable[[bytes], str]


# ---------------------------------------------------------------------
# Format Parsers
# ---------------------------------------------------------------------

def _extract_txt(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")


def _extract_docx(content: bytes) -> str:
    document = docx.Document(io.BytesIO(content))

    lines: List[str] = [para.text for para in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            lines.append(" ".join(cell.text.strip() for cell in row.cells))

    return "\n".join(lines)


def _extract_xlsx(content: bytes) -> str:
    workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    try:
        lines: List[str] = []
        for sheet in workbook.worksheets:
            for row in sheet.iter_rows(values_only=True):
                if all(value is None for value in row):
                    continue
                lines.append(
                    " ".join("" if value is None else str(value) for value in row)
                )
    finally:
        workbook.close()

    return "".join(line + "\n" for line in lines)


EXTRACTOR_REGISTRY: Dict[str, Extractor] = {
    ".txt": _extract_txt,
    ".docx": _extract_docx,
    ".xlsx": _extract_xlsx,
}


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def supported_extensions() -> List[str]:
    return sorted(EXTRACTOR_REGISTRY)


def extract_document_text(
    filename: str,
    content: bytes,
    max_bytes: Optional[int] = None,
) -> str:
    """
    Extract plain text from an uploaded file.

    Parameters
    ----------
    filename : str
        Original file name; its extension selects the parser.

    content : bytes
        Raw file content.

    max_bytes : Optional[int]
        Reject files larger than this many bytes.

    Raises
    ------
    UnsupportedDocumentError
        If the extension has no registered parser.

    DocumentTooLargeError
        If the content exceeds `max_bytes`.

    DocumentSourceError
        If the parser fails on the content.
    """
    extension = PurePath(filename or "").suffix.lower()
    extractor = EXTRACTOR_REGISTRY.get(extension)
    if extractor is None:
        raise UnsupportedDocumentError(f"Unsupported file type: {filename!r}")

    if max_bytes is not None and len(content) > max_bytes:
        raise DocumentTooLargeError(
            f"File {filename!r} is {len(content)} bytes (limit {max_bytes})"
        )

    try:
        text = extractor(content)
    except Exception as exc:
        raise DocumentSourceError(
            f"Failed to parse {filename!r}: {type(exc).__name__}"
        ) from exc

    logger.info("Extracted %d chars from %s", len(text), filename)
    return text
