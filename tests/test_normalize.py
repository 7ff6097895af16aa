"""
Tests for the single-document pipeline and the batch orchestrator.

Extraction is faked (see conftest.py); these tests cover ordering,
failure isolation, and end-to-end cleanup of realistic resume text.
"""
import logging

import pytest

from resume_text.normalize import clean_extracted_text, normalize, with_fallback

RESUME = (
    "John  Doe\r\n"
    "Senior\tEngineer\r\n"
    "\r\n"
    "SUMMARY:\r\n"
    "Built systems\r\n"
    "that scale .\r\n"
    "EXPERIENCE\r\n"
    "October 2024 – Present\r\n"
    "-- 1 of 2 --\r\n"
    "• Led a full - time team\r\n"
    "▪ Migrated services 2020-2023\r\n"
    "Languages:\r\n"
    "Python , Rust\r\n"
    "Contact: john @ example.com | github.com/jd\r\n"
)


class TestCleanExtractedText:

    def test_full_resume(self):
        assert clean_extracted_text(RESUME) == (
            "John Doe\n"
            "Senior Engineer\n"
            "SUMMARY:\n"
            "Built systems that scale.\n"
            "EXPERIENCE\n"
            "October 2024 – Present\n"
            "● Led a full-time team\n"
            "● Migrated services 2020 - 2023\n"
            "Languages:\n"
            "Python, Rust Contact: john@example.com | github.com/jd"
        )

    def test_none_and_blank(self):
        assert clean_extracted_text(None) == ""
        assert clean_extracted_text("  \n\n\t ") == ""

    def test_bullet_never_merged(self):
        text = clean_extracted_text("Jane\nDesigner\nsome body text\n◦ a bullet")
        assert text.splitlines()[-1] == "● a bullet"


class TestNormalize:

    def test_empty_batch(self, extractor):
        assert normalize([], extractor=extractor) == []
        assert normalize(None, extractor=extractor) == []

    def test_absent_payload_skips_extractor(self, extractor):
        result = normalize([None, b"Jane\nDesigner"], extractor=extractor)
        assert result == ["", "Jane\nDesigner"]
        assert extractor.calls == [b"Jane\nDesigner"]

    def test_failure_is_isolated(self, extractor, caplog):
        docs = [b"Ann\nEngineer", b"FAIL: broken pdf", b"Bob\nDesigner"]
        with caplog.at_level(logging.WARNING, logger="resume_text.normalize"):
            result = normalize(docs, extractor=extractor)
        assert len(result) == 3
        assert result == ["Ann\nEngineer", "", "Bob\nDesigner"]
        assert "Document 1 could not be processed" in caplog.text

    def test_unexpected_exception_is_isolated(self):
        class Exploding:
            def extract(self, payload):
                raise RuntimeError("timeout")

        assert normalize([b"a", b"b"], extractor=Exploding()) == ["", ""]

    def test_pages_are_flattened(self, paged_extractor):
        payload = "Ann\nEngineer\f   \fSummary:\nBuilt things\nthat work.".encode("utf-8")
        assert normalize([payload], extractor=paged_extractor) == [
            "Ann\nEngineer\nSummary:\nBuilt things that work."
        ]

    def test_empty_bytes_go_to_extractor(self, extractor):
        assert normalize([b""], extractor=extractor) == [""]
        assert extractor.calls == [b""]

    @pytest.mark.parametrize("workers", [1, 2, 8])
    def test_alignment_with_workers(self, extractor, workers):
        docs = [f"Person {i}\nRole {i}".encode() if i % 3 else b"FAIL" for i in range(10)]
        result = normalize(docs, extractor=extractor, max_workers=workers)
        assert len(result) == len(docs)
        for i, text in enumerate(result):
            assert text == ("" if i % 3 == 0 else f"Person {i}\nRole {i}")

    def test_flat_string_result_accepted(self):
        class StringExtractor:
            def extract(self, payload):
                return payload.decode()

        assert normalize([b"A\nB"], extractor=StringExtractor()) == ["A\nB"]


class TestWithFallback:

    def test_passes_through_result(self):
        assert with_fallback(lambda i, x: x.upper())(0, "ok") == "OK"

    def test_returns_default_on_error(self):
        def boom(i, x):
            raise ValueError("bad")

        assert with_fallback(boom, default="-")(3, "x") == "-"
