"""In-memory images and the registry of named images."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Image:
    """A named, length-known byte source."""

    name: str
    data: bytes | bytearray | memoryview
    source: Optional[str] = None

    @property
    def length(self) -> int:
        return len(self.data)

    def read_into(self, buffer: bytearray, offset: int, length: int) -> None:
        """Copy ``length`` bytes starting at ``offset`` into the front of ``buffer``."""
        if offset < 0 or length < 0 or offset + length > self.length:
            raise ValueError(
                f"Read of {length} bytes at offset {offset} is outside image {self.name} ({self.length} bytes)"
            )
        if length > len(buffer):
            raise ValueError(f"Buffer of {len(buffer)} bytes cannot hold {length} bytes")
        buffer[:length] = memoryview(self.data)[offset : offset + length]


class ImageRegistry:
    """Named images available for lookup without touching the filesystem or network."""

    def __init__(self, images: Optional[list[Image]] = None) -> None:
        self._images: dict[str, Image] = {}
        for image in images or []:
            self.register(image)

    def register(self, image: Image) -> Image:
        """Add ``image``, replacing any image already registered under the same name."""
        self._images[image.name] = image
        return image

    def unregister(self, name: str) -> None:
        self._images.pop(name, None)

    def find(self, name: str) -> Optional[Image]:
        return self._images.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._images

    def __iter__(self) -> Iterator[Image]:
        return iter(list(self._images.values()))

    def __len__(self) -> int:
        return len(self._images)


__all__ = ["Image", "ImageRegistry"]
