"""Resolve image identifiers into images: registry names, URLs or local files."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path, PurePosixPath
from urllib.parse import urlsplit

import requests

from imgdigest.errors import AcquisitionError
from imgdigest.io.fetcher import fetch_bytes
from imgdigest.io.images import Image, ImageRegistry

logger = logging.getLogger("imgdigest.acquire")

URL_SCHEMES = frozenset({"http", "https"})


def image_name_for(identifier: str) -> str:
    """Return the name an acquired image is registered under."""
    try:
        parts = urlsplit(identifier)
    except ValueError:
        return Path(identifier).name or identifier
    if parts.scheme in URL_SCHEMES:
        return PurePosixPath(parts.path).name or parts.netloc
    return Path(identifier).name or identifier


class ImageAcquirer:
    """Turns identifiers into registered images.

    Acquired images are registered under their basename, and a later identifier
    equal to a registered name is served from the registry. Within one
    invocation ``sub/x.bin`` followed by ``x.bin`` therefore yields the
    ``sub/`` image twice.
    """

    def __init__(
        self,
        registry: ImageRegistry | None = None,
        *,
        search_paths: Sequence[Path] = (),
        timeout_seconds: float | None = 30.0,
        retries: int = 0,
        backoff_seconds: float = 1.0,
    ) -> None:
        self.registry = registry if registry is not None else ImageRegistry()
        self.search_paths = [Path(p) for p in search_paths]
        self.timeout_seconds = timeout_seconds
        self.retries = retries
        self.backoff_seconds = backoff_seconds

    def __call__(self, identifier: str) -> Image:
        return self.acquire(identifier)

    def acquire(self, identifier: str) -> Image:
        """Return the image for ``identifier`` or raise :class:`AcquisitionError`."""
        if not identifier:
            raise AcquisitionError(identifier, "empty identifier")

        image = self.registry.find(identifier)
        if image is not None:
            logger.debug("Using registered image %s", identifier)
            return image

        try:
            scheme = urlsplit(identifier).scheme
        except ValueError as exc:
            raise AcquisitionError(identifier, f"invalid URL: {exc}") from exc

        if scheme in URL_SCHEMES:
            data = self._download(identifier)
        else:
            data = self._read_local(identifier)

        return self.registry.register(Image(name=image_name_for(identifier), data=data, source=identifier))

    def _download(self, url: str) -> bytes:
        logger.info("Fetching image %s", url)
        try:
            return fetch_bytes(
                url,
                timeout_seconds=self.timeout_seconds,
                retries=self.retries,
                backoff_seconds=self.backoff_seconds,
            )
        except FileNotFoundError as exc:
            raise AcquisitionError(url, str(exc)) from exc
        except requests.RequestException as exc:
            raise AcquisitionError(url, f"download failed: {exc}") from exc

    def _read_local(self, identifier: str) -> bytes:
        try:
            candidates = self._candidates(identifier)
        except (RuntimeError, ValueError) as exc:
            raise AcquisitionError(identifier, f"invalid path: {exc}") from exc

        for candidate in candidates:
            try:
                if not candidate.is_file():
                    continue
                logger.debug("Reading image %s from %s", identifier, candidate)
                return candidate.read_bytes()
            except (OSError, ValueError) as exc:
                raise AcquisitionError(identifier, f"read failed: {exc}") from exc
        raise AcquisitionError(identifier, "no such image")

    def _candidates(self, identifier: str) -> list[Path]:
        path = Path(identifier).expanduser()
        if path.is_absolute():
            return [path]
        return [path, *(root / path for root in self.search_paths)]


__all__ = ["ImageAcquirer", "URL_SCHEMES", "image_name_for"]
