"""
Document extraction: turns an uploaded binary payload into raw text.

The extractor answers with either a flat string or per-page fragments;
`result_to_text` flattens both shapes into one string for the cleaner.
"""
import io
import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Union

import pdfplumber
from docx import Document

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF"
ZIP_MAGIC = b"PK\x03\x04"
TEXT_ENCODINGS = ['utf-8-sig', 'windows-1252', 'iso-8859-1']


class ExtractionError(Exception):
    """The extractor could not produce text for a document."""


@dataclass(frozen=True)
class FlatText:
    text: str


@dataclass(frozen=True)
class Pages:
    pages: Sequence[Optional[str]]


ExtractionResult = Union[FlatText, Pages]


class DocumentExtractor(Protocol):
    def extract(self, payload: bytes) -> ExtractionResult: ...


def result_to_text(result: Union[ExtractionResult, str, None]) -> str:
    if result is None:
        return ""
    if isinstance(result, str):
        return result
    if isinstance(result, FlatText):
        return result.text or ""
    if isinstance(result, Pages):
        pages = [p for p in result.pages if p and p.strip()]
        return "\n\n".join(pages)
    raise TypeError(f"Unsupported extraction result: {type(result).__name__}")


def sniff_format(payload: bytes) -> str:
    if payload.startswith(PDF_MAGIC):
        return "pdf"
    if payload.startswith(ZIP_MAGIC):
        return "docx"
    return "text"


def _read_pdf(payload: bytes) -> Pages:
    with pdfplumber.open(io.BytesIO(payload)) as pdf:
        return Pages([p.extract_text() or "" for p in pdf.pages])

def _read_docx(payload: bytes) -> FlatText:
    doc = Document(io.BytesIO(payload))
    return FlatText("\n".join(p.text for p in doc.paragraphs))

def _read_text(payload: bytes) -> FlatText:
    # iso-8859-1 accepts any byte sequence, so the final fallback is rarely reached
    for encoding in TEXT_ENCODINGS:
        try:
            return FlatText(payload.decode(encoding))
        except (UnicodeDecodeError, LookupError):
            continue
    return FlatText(payload.decode('utf-8', errors='ignore'))


_READERS = {"pdf": _read_pdf, "docx": _read_docx, "text": _read_text}


class PlumberExtractor:
    """Default extractor: pdfplumber for PDF, python-docx for DOCX, decoding for anything else."""

    def extract(self, payload: bytes) -> ExtractionResult:
        kind = sniff_format(payload)
        logger.debug("Extracting %d bytes as %s", len(payload), kind)
        try:
            return _READERS[kind](payload)
        except Exception as e:
            raise ExtractionError(f"Could not extract text from {kind} document: {e}") from e
