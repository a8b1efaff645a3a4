"""Conversion between UTF-8 bytes and text."""

from __future__ import annotations


def utf8_to_text(data: bytes | bytearray | memoryview) -> str:
    """Decode UTF-8 bytes, dropping any invalid sequences."""
    return bytes(data).decode("utf-8", errors="ignore")


def text_to_utf8(text: str) -> bytes:
    """Encode text as UTF-8, dropping characters that cannot be encoded."""
    return text.encode("utf-8", errors="ignore")