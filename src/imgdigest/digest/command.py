"""Digest command orchestration: print a report or verify one expected hash.

For each identifier in order the image is acquired, digested through the
chunked reader and hex-encoded. In print mode a ``<hex>  <name>`` line is
emitted per image. In verify mode the first image that can be acquired
decides the outcome; later identifiers are never touched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from imgdigest.digest.algorithms import DigestAlgorithm
from imgdigest.digest.hexcodec import hex_encode
from imgdigest.digest.reader import CHUNK_SIZE, digest_image
from imgdigest.errors import AcquisitionError, NothingVerified, OptionParseError, VerificationMismatch
from imgdigest.io.images import Image

logger = logging.getLogger("imgdigest.command")

Acquire = Callable[[str], Image]
Emit = Callable[[str], None]


class DigestOptions(BaseModel):
    """Per-invocation options; ``expected_hash`` switches on verify mode."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    expected_hash: Optional[str] = None

    @field_validator("expected_hash")
    @classmethod
    def _reject_empty_hash(cls, value: Optional[str]) -> Optional[str]:
        # compared verbatim against the lowercase digest; no case folding or trimming
        if value is not None and not value:
            raise ValueError("expected hash must not be empty")
        return value

    @property
    def verify(self) -> bool:
        return self.expected_hash is not None


@dataclass(frozen=True)
class DigestEntry:
    name: str
    hexdigest: str


@dataclass(frozen=True)
class AcquisitionFailure:
    identifier: str
    reason: str


@dataclass
class DigestReport:
    """What one command invocation produced."""

    algorithm: str
    entries: list[DigestEntry] = field(default_factory=list)
    failures: list[AcquisitionFailure] = field(default_factory=list)
    verified: Optional[bool] = None


def format_report_line(hexdigest: str, name: str) -> str:
    """Return the print-mode report line (without terminator)."""
    return f"{hexdigest}  {name}"


def build_options(expected_hash: Optional[str] = None) -> DigestOptions:
    """Build :class:`DigestOptions`, reporting bad values as :class:`OptionParseError`."""
    try:
        return DigestOptions(expected_hash=expected_hash)
    except ValueError as exc:
        raise OptionParseError(str(exc)) from exc


def digest_images(
    identifiers: Sequence[str],
    options: DigestOptions,
    algorithm: DigestAlgorithm,
    *,
    acquire: Acquire,
    emit: Emit,
    chunk_size: int = CHUNK_SIZE,
    max_images: Optional[int] = None,
) -> DigestReport:
    """Digest each identifier with ``algorithm`` and print or verify the result.

    Raises:
        OptionParseError: no identifiers, or more than ``max_images``.
        VerificationMismatch: verify mode and the first acquired image differs.
        NothingVerified: verify mode and no identifier could be acquired.
    """
    identifiers = list(identifiers)
    if not identifiers:
        raise OptionParseError("at least one image is required")
    if max_images is not None and len(identifiers) > max_images:
        raise OptionParseError(f"at most {max_images} images may be given, got {len(identifiers)}")

    report = DigestReport(algorithm=algorithm.name)

    for identifier in identifiers:
        try:
            image = acquire(identifier)
        except AcquisitionError as exc:
            logger.warning("Skipping %s: %s", identifier, exc.reason)
            report.failures.append(AcquisitionFailure(identifier, exc.reason))
            continue

        hexdigest = hex_encode(digest_image(image, algorithm, chunk_size=chunk_size))
        logger.debug("%s(%s) = %s", algorithm.name, image.name, hexdigest)

        if options.verify:
            if hexdigest != options.expected_hash:
                raise VerificationMismatch(image.name, options.expected_hash, hexdigest)
            report.entries.append(DigestEntry(image.name, hexdigest))
            report.verified = True
            return report

        report.entries.append(DigestEntry(image.name, hexdigest))
        emit(format_report_line(hexdigest, image.name))

    if options.verify:
        raise NothingVerified(identifiers)
    return report


__all__ = [
    "AcquisitionFailure",
    "DigestEntry",
    "DigestOptions",
    "DigestReport",
    "build_options",
    "digest_images",
    "format_report_line",
]
