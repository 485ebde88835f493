"""Digest algorithm bindings over :mod:`hashlib`.

Each binding describes one hash function: the size of its working state, the
size of its output and the init/update/final streaming contract. Feeding the
input in any chunking yields the same final digest, which is what lets the
chunked reader pick its buffer size freely.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class DigestContext:
    """Working state for one digest computation."""

    __slots__ = ("algorithm", "_hasher", "_finalised")

    def __init__(self, algorithm: "DigestAlgorithm", hasher: Any) -> None:
        self.algorithm = algorithm
        self._hasher = hasher
        self._finalised = False

    @property
    def finalised(self) -> bool:
        return self._finalised

    def _require_live(self) -> None:
        if self._finalised:
            raise RuntimeError(f"{self.algorithm.name} context already finalised; call init() again")


@dataclass(frozen=True)
class DigestAlgorithm:
    """Immutable descriptor for one supported hash function."""

    name: str
    context_size: int
    digest_size: int
    block_size: int
    factory: Callable[[], Any]

    def init(self) -> DigestContext:
        """Return a fresh working state."""
        return DigestContext(self, self.factory())

    def update(self, ctx: DigestContext, data: bytes | bytearray | memoryview) -> None:
        """Absorb ``data`` into ``ctx``."""
        ctx._require_live()
        ctx._hasher.update(data)

    def final(self, ctx: DigestContext) -> bytes:
        """Finish ``ctx`` and return exactly ``digest_size`` bytes."""
        ctx._require_live()
        ctx._finalised = True
        out = ctx._hasher.digest()
        if len(out) != self.digest_size:
            raise RuntimeError(
                f"{self.name} produced {len(out)} bytes, expected {self.digest_size}"
            )
        return out


# context_size counts the chaining value, one pending input block and the
# 64-bit length counter.
MD5 = DigestAlgorithm(name="md5", context_size=16 + 64 + 8, digest_size=16, block_size=64, factory=hashlib.md5)
SHA1 = DigestAlgorithm(name="sha1", context_size=20 + 64 + 8, digest_size=20, block_size=64, factory=hashlib.sha1)
SHA256 = DigestAlgorithm(
    name="sha256", context_size=32 + 64 + 8, digest_size=32, block_size=64, factory=hashlib.sha256
)

ALGORITHMS: dict[str, DigestAlgorithm] = {alg.name: alg for alg in (MD5, SHA1, SHA256)}


def get_algorithm(name: str) -> DigestAlgorithm:
    """Return the binding for ``name`` (``md5``, ``sha1`` or ``sha256``)."""
    try:
        return ALGORITHMS[name.lower()]
    except KeyError as exc:
        raise KeyError(f"Unsupported digest algorithm '{name}'.") from exc


__all__ = ["ALGORITHMS", "DigestAlgorithm", "DigestContext", "MD5", "SHA1", "SHA256", "get_algorithm"]
