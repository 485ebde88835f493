"""Chunked digest reader: memory use is bounded by the buffer, not the image."""

from __future__ import annotations

from imgdigest.digest.algorithms import DigestAlgorithm
from imgdigest.io.images import Image

CHUNK_SIZE = 128


def digest_image(image: Image, algorithm: DigestAlgorithm, *, chunk_size: int = CHUNK_SIZE) -> bytes:
    """Return the raw digest of ``image`` computed through a ``chunk_size`` buffer."""
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")

    buf = bytearray(chunk_size)
    view = memoryview(buf)
    ctx = algorithm.init()
    offset = 0
    remaining = image.length
    while remaining:
        frag_len = min(remaining, chunk_size)
        image.read_into(buf, offset, frag_len)
        algorithm.update(ctx, view[:frag_len])
        offset += frag_len
        remaining -= frag_len
    return algorithm.final(ctx)


__all__ = ["CHUNK_SIZE", "digest_image"]
