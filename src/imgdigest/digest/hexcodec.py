"""Lowercase hex encoding for digest output."""

from __future__ import annotations


def hex_encode(data: bytes | bytearray | memoryview) -> str:
    """Return ``data`` as lowercase hex, two characters per byte, no separators."""
    return bytes(data).hex()


__all__ = ["hex_encode"]
