from __future__ import annotations

import hashlib
from typing import Sequence

from imgdigest.errors import AcquisitionError
from imgdigest.io.images import Image, ImageRegistry

EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"
EMPTY_SHA1 = "da39a3ee5e6b4b0d3255bfef95601890afd80709"
EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


def sample_bytes(length: int) -> bytes:
    """Deterministic, non-repeating-looking payload of ``length`` bytes."""

    return bytes((i * 31 + 7) % 251 for i in range(length))


class RecordingAcquirer:
    """Acquirer over an in-memory registry that records every identifier asked for."""

    def __init__(self, images: Sequence[Image] = ()) -> None:
        self.registry = ImageRegistry(list(images))
        self.calls: list[str] = []

    def acquire(self, identifier: str) -> Image:
        self.calls.append(identifier)
        image = self.registry.find(identifier)
        if image is None:
            raise AcquisitionError(identifier, "no such image")
        return image

    __call__ = acquire


class RecordingHasher:
    """hashlib-compatible object that keeps a copy of each chunk it is fed."""

    def __init__(self) -> None:
        self.chunks: list[bytes] = []
        self._inner = hashlib.sha256()

    def update(self, data) -> None:
        self.chunks.append(bytes(data))
        self._inner.update(data)

    def digest(self) -> bytes:
        return self._inner.digest()
