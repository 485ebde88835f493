"""HTTP image download utilities."""

from __future__ import annotations

from collections.abc import Mapping

import requests

from imgdigest.util.retry import retry

DEFAULT_HEADERS: Mapping[str, str] = {
    "User-Agent": "imgdigest/0.1",
    "Accept": "*/*",
}


def fetch_bytes(
    url: str,
    *,
    timeout_seconds: float | None = None,
    retries: int = 0,
    backoff_seconds: float = 1.0,
    headers: Mapping[str, str] | None = None,
) -> bytes:
    """Download ``url`` into memory.

    A 404 raises ``FileNotFoundError`` straight away; other failures are retried
    ``retries`` times with exponential backoff.
    """

    def _download() -> bytes:
        merged_headers = dict(DEFAULT_HEADERS)
        if headers:
            merged_headers.update(headers)

        with requests.get(
            url,
            stream=True,
            timeout=timeout_seconds,
            headers=merged_headers,
        ) as response:
            if response.status_code == 404:
                raise FileNotFoundError(f"Image not found at {url}")
            response.raise_for_status()

            payload = bytearray()
            for chunk in response.iter_content(chunk_size=8192):
                if chunk:
                    payload.extend(chunk)
        return bytes(payload)

    return retry(
        _download,
        attempts=max(1, retries + 1),
        backoff_seconds=backoff_seconds,
        give_up_on=(FileNotFoundError,),
    )


__all__ = ["fetch_bytes"]
