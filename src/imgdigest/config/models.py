"""Pydantic models describing imgdigest configuration."""

from __future__ import annotations

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class DigestConfig(BaseModel):
    """Digest engine settings."""

    model_config = ConfigDict(extra="forbid")

    chunk_size: int = Field(default=128, ge=1)
    max_images: int = Field(default=64, ge=1)


class AcquisitionConfig(BaseModel):
    """How image identifiers are resolved."""

    model_config = ConfigDict(extra="forbid")

    search_paths: List[Path] = Field(default_factory=list)
    timeout_seconds: float = Field(default=30.0, gt=0)
    retries: int = Field(default=2, ge=0)
    backoff_seconds: float = Field(default=1.0, ge=0)


class LoggingConfig(BaseModel):
    """Diagnostics written to stderr and optionally a log file."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_path: Optional[Path] = None


class ImgDigestConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="forbid")

    digest: DigestConfig = Field(default_factory=DigestConfig)
    acquisition: AcquisitionConfig = Field(default_factory=AcquisitionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = [
    "AcquisitionConfig",
    "DigestConfig",
    "ImgDigestConfig",
    "LoggingConfig",
]
