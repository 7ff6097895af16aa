"""Shared fixtures: fake extractors so pipeline tests never touch real PDFs."""
import pytest

from resume_text.ingest import ExtractionError, FlatText, Pages


class FakeExtractor:
    """Decodes the payload as UTF-8; payloads starting with b"FAIL" raise."""

    def __init__(self, paged=False):
        self.paged = paged
        self.calls = []

    def extract(self, payload):
        self.calls.append(payload)
        if payload.startswith(b"FAIL"):
            raise ExtractionError("malformed document")
        text = payload.decode("utf-8")
        if self.paged:
            return Pages(text.split("\f"))
        return FlatText(text)


@pytest.fixture
def extractor():
    return FakeExtractor()


@pytest.fixture
def paged_extractor():
    return FakeExtractor(paged=True)
