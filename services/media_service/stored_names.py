"""
Stored-name encoding for the media blob store.

A blob is persisted as a single file named ``<id>__<original filename>``.
The filename is the only record, so composing and parsing it must be exact
inverses for every name this store writes.
"""

from __future__ import annotations

import re
import unicodedata

STORED_NAME_DELIMITER = "__"
FALLBACK_FILENAME = "file"
# Bytes, not characters: the id prefix plus this must fit a 255-byte name.
MAX_FILENAME_LENGTH = 200

_SEPARATORS = re.compile(r"[/\\]")


def _strip_control_characters(value: str) -> str:
    return "".join(ch for ch in value if unicodedata.category(ch) != "Cc")


def _truncate_utf8(value: str, limit: int) -> str:
    return value.encode("utf-8")[:limit].decode("utf-8", "ignore")


def sanitize_filename(raw_filename: str | None) -> str:
    """
    Reduce a client-supplied filename to one safe path component.

    Directory parts and ``.``/``..`` segments are dropped and only the last
    segment survives. NUL and other control characters are removed and the
    name is NFC-normalized; everything else (spaces, non-ASCII letters,
    leading underscores) is kept as typed. Names longer than
    ``MAX_FILENAME_LENGTH`` UTF-8 bytes are truncated keeping their
    extension. Never returns an empty string.
    """
    if not raw_filename:
        return FALLBACK_FILENAME

    cleaned_name = _strip_control_characters(unicodedata.normalize("NFC", raw_filename))
    segments = [
        segment.strip()
        for segment in _SEPARATORS.split(cleaned_name)
        if segment.strip() not in ("", ".", "..")
    ]
    if not segments:
        return FALLBACK_FILENAME

    cleaned = segments[-1]
    if len(cleaned.encode("utf-8")) > MAX_FILENAME_LENGTH:
        stem, dot, suffix = cleaned.rpartition(".")
        suffix_bytes = len(suffix.encode("utf-8"))
        if dot and stem and suffix_bytes < MAX_FILENAME_LENGTH // 2:
            stem = _truncate_utf8(stem, MAX_FILENAME_LENGTH - suffix_bytes - 1)
            cleaned = f"{stem}.{suffix}"
        else:
            cleaned = _truncate_utf8(cleaned, MAX_FILENAME_LENGTH)
    return cleaned


def compose_stored_name(blob_id: str, filename: str) -> str:
    """Build the on-disk name for a blob."""
    return f"{blob_id}{STORED_NAME_DELIMITER}{filename}"


def parse_stored_name(stored_name: str) -> tuple[str, str]:
    """
    Split a stored name into ``(blob_id, filename)`` on the first delimiter.

    Names with no delimiter, or with the delimiter at position 0, were not
    written by this store; both parts then default to the full name.
    """
    index = stored_name.find(STORED_NAME_DELIMITER)
    if index <= 0:
        return stored_name, stored_name
    return stored_name[:index], stored_name[index + len(STORED_NAME_DELIMITER) :]


def stored_name_prefix(blob_id: str) -> str:
    """Prefix every stored name of ``blob_id`` starts with."""
    return f"{blob_id}{STORED_NAME_DELIMITER}"
