"""Exception hierarchy shared by the digest commands."""

from __future__ import annotations


class ImgDigestError(Exception):
    """Base class for all imgdigest failures."""


class OptionParseError(ImgDigestError, ValueError):
    """Raised when a command invocation is malformed, before any image is touched."""


class AcquisitionError(ImgDigestError):
    """Raised when an image identifier cannot be resolved into an image."""

    def __init__(self, identifier: str, reason: str) -> None:
        super().__init__(f"Could not acquire {identifier!r}: {reason}")
        self.identifier = identifier
        self.reason = reason


class VerificationError(ImgDigestError):
    """Base class for verify-mode failures."""


class VerificationMismatch(VerificationError):
    """The computed digest differs from the expected one."""

    def __init__(self, name: str, expected: str, actual: str) -> None:
        super().__init__(f"Digest mismatch for {name}: expected {expected}, got {actual}")
        self.name = name
        self.expected = expected
        self.actual = actual


class NothingVerified(VerificationError):
    """Verify mode ran out of identifiers without acquiring a single image."""

    def __init__(self, identifiers: list[str]) -> None:
        super().__init__(f"No image could be acquired for verification ({', '.join(identifiers)})")
        self.identifiers = identifiers


__all__ = [
    "AcquisitionError",
    "ImgDigestError",
    "NothingVerified",
    "OptionParseError",
    "VerificationError",
    "VerificationMismatch",
]
