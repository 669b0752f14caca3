"""Unit tests for stored-name sanitizing, composing and parsing."""

from __future__ import annotations

import pytest

from services.media_service.blob_models import BlobDescriptor
from services.media_service.stored_names import (
    FALLBACK_FILENAME,
    MAX_FILENAME_LENGTH,
    compose_stored_name,
    parse_stored_name,
    sanitize_filename,
    stored_name_prefix,
)


class TestSanitizeFilename:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("notes.txt", "notes.txt"),
            ("../../etc/passwd", "passwd"),
            ("..\\..\\windows\\system.ini", "system.ini"),
            ("/absolute/path/report.pdf", "report.pdf"),
            ("my essay draft.docx", "my essay draft.docx"),
            ("报告.pdf", "报告.pdf"),
            ("résumé.pdf", "résumé.pdf"),
            ("__init__.py", "__init__.py"),
            ("uploads/  spaced name.txt  ", "spaced name.txt"),
        ],
    )
    def test_keeps_only_a_safe_last_segment(self, raw: str, expected: str) -> None:
        assert sanitize_filename(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "..", "../..", "/", "./"])
    def test_falls_back_when_nothing_usable_remains(self, raw: str | None) -> None:
        assert sanitize_filename(raw) == FALLBACK_FILENAME

    def test_result_never_contains_path_separators(self) -> None:
        cleaned = sanitize_filename("a/b\\c/../d.txt")
        assert "/" not in cleaned
        assert "\\" not in cleaned
        assert cleaned not in ("", ".", "..")

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("bad\x00name.txt", "badname.txt"),
            ("line\r\nbreak.txt", "linebreak.txt"),
            ("tab\there\x7f.txt", "tabhere.txt"),
            (".\x00.", FALLBACK_FILENAME),
        ],
    )
    def test_removes_control_characters(self, raw: str, expected: str) -> None:
        assert sanitize_filename(raw) == expected

    def test_normalizes_decomposed_unicode(self) -> None:
        assert sanitize_filename("re\u0301sume\u0301.pdf") == "r\u00e9sum\u00e9.pdf"

    def test_truncates_long_names_keeping_extension(self) -> None:
        cleaned = sanitize_filename("x" * 500 + ".png")

        assert len(cleaned) == MAX_FILENAME_LENGTH
        assert cleaned.endswith(".png")

    def test_truncates_multibyte_names_by_encoded_length(self) -> None:
        cleaned = sanitize_filename("报" * 300 + ".pdf")

        assert len(cleaned.encode("utf-8")) <= MAX_FILENAME_LENGTH
        assert cleaned.endswith(".pdf")
        assert set(cleaned.removesuffix(".pdf")) == {"报"}


class TestStoredNameParsing:
    def test_compose_then_parse_recovers_id_and_filename(self) -> None:
        blob_id = "0b6c2a1e-6d2f-4f0e-9a57-5d1c0f2b9e11"

        stored_name = compose_stored_name(blob_id, "photo.jpg")

        assert stored_name == f"{blob_id}__photo.jpg"
        assert parse_stored_name(stored_name) == (blob_id, "photo.jpg")

    def test_splits_on_first_delimiter_only(self) -> None:
        assert parse_stored_name("abc__my__file.txt") == ("abc", "my__file.txt")

    @pytest.mark.parametrize("stored_name", ["legacy.txt", "__orphan.txt"])
    def test_foreign_names_use_full_name_for_both_parts(self, stored_name: str) -> None:
        assert parse_stored_name(stored_name) == (stored_name, stored_name)

    def test_prefix_matches_only_its_own_id(self) -> None:
        prefix = stored_name_prefix("abc")

        assert compose_stored_name("abc", "a.txt").startswith(prefix)
        assert not compose_stored_name("abcd", "a.txt").startswith(prefix)

    def test_descriptor_from_stored_name(self) -> None:
        descriptor = BlobDescriptor.from_stored_name("id1__cv.pdf")

        assert descriptor.blob_id == "id1"
        assert descriptor.filename == "cv.pdf"
        assert descriptor.stored_name == "id1__cv.pdf"
