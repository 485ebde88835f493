"""Shared typing helpers for imgdigest modules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from imgdigest.io.images import Image


@runtime_checkable
class SupportsAcquire(Protocol):
    """Objects that resolve an image identifier into an image."""

    def acquire(self, identifier: str) -> "Image":
        """Return the image for ``identifier`` or raise ``AcquisitionError``."""
        ...


__all__ = ["SupportsAcquire"]
