"""
Resume text normalization pipeline.

Per document: extractor -> strip_artifacts -> classify_lines ->
reconstruct_lines -> repair_punctuation. A failing document yields ""
in its slot and never aborts the rest of the batch.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence, TypeVar

from resume_text.artifacts import strip_artifacts
from resume_text.classify import classify_lines
from resume_text.ingest import DocumentExtractor, PlumberExtractor, result_to_text
from resume_text.reconstruct import join_logical_lines, reconstruct_lines
from resume_text.repair import repair_punctuation

logger = logging.getLogger(__name__)

T = TypeVar("T")


def clean_extracted_text(raw: Optional[str]) -> str:
    """Turn one document's raw extracted text into clean, paragraph-structured text."""
    cleaned = strip_artifacts(raw)
    lines = classify_lines(cleaned)
    text = join_logical_lines(reconstruct_lines(lines))
    return repair_punctuation(text)


def with_fallback(fn: Callable[[int, T], str], default: str = "") -> Callable[[int, T], str]:
    """Wrap a per-item function so any exception becomes `default`."""
    def wrapped(index: int, item: T) -> str:
        try:
            return fn(index, item)
        except Exception as e:
            logger.warning("Document %d could not be processed: %s", index, e)
            logger.debug("Traceback for document %d", index, exc_info=True)
            return default
    return wrapped


def normalize(
    documents: Optional[Sequence[Optional[bytes]]],
    extractor: Optional[DocumentExtractor] = None,
    max_workers: int = 1,
) -> List[str]:
    """
    Extract and normalize a batch of documents.

    Returns one string per input slot, in input order. Absent payloads
    (None) give "" without calling the extractor; extraction failures
    also give "".
    """
    if not documents:
        return []
    extractor = extractor or PlumberExtractor()

    def process(index: int, payload: Optional[bytes]) -> str:
        if payload is None:
            return ""
        result = extractor.extract(payload)
        return clean_extracted_text(result_to_text(result))

    worker = with_fallback(process)
    docs = list(documents)
    if max_workers <= 1 or len(docs) == 1:
        return [worker(i, d) for i, d in enumerate(docs)]

    # map() yields in submission order, so slot i stays aligned with input i
    with ThreadPoolExecutor(max_workers=min(max_workers, len(docs))) as pool:
        return list(pool.map(worker, range(len(docs)), docs))
