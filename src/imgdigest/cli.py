"""Command-line entry points: md5sum, sha1sum and sha256sum over images."""

from __future__ import annotations

import errno
from pathlib import Path
from typing import List, Optional

import typer

from imgdigest.config import ConfigError, ImgDigestConfig, dump_example_config, load_config
from imgdigest.digest.algorithms import MD5, SHA1, SHA256, DigestAlgorithm
from imgdigest.digest.command import build_options, digest_images
from imgdigest.errors import NothingVerified, OptionParseError, VerificationMismatch
from imgdigest.io.acquire import ImageAcquirer
from imgdigest.io.images import ImageRegistry
from imgdigest.util.logging import configure_logging
from imgdigest.util.typing import SupportsAcquire

app = typer.Typer(add_completion=False, help="Compute or verify image digests")

EXIT_MISMATCH = errno.ERANGE
EXIT_NOTHING_VERIFIED = 1

_IMAGES_HELP = "Image names, file paths or http(s) URLs"
_SUM_HELP = "Expected hex digest; verify the first acquired image instead of printing"
_CONFIG_HELP = "Path to a YAML/TOML/JSON config file"


def build_acquirer(cfg: ImgDigestConfig) -> SupportsAcquire:
    """Return the image acquirer for this invocation."""

    acq = cfg.acquisition
    return ImageAcquirer(
        ImageRegistry(),
        search_paths=acq.search_paths,
        timeout_seconds=acq.timeout_seconds,
        retries=acq.retries,
        backoff_seconds=acq.backoff_seconds,
    )


def _load(config_path: Optional[Path]) -> ImgDigestConfig:
    try:
        return load_config(config_path)
    except ConfigError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _digest_exec(
    algorithm: DigestAlgorithm,
    images: List[str],
    expected: Optional[str],
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    cfg = _load(config_path)
    configure_logging(level="INFO" if verbose else cfg.logging.level, log_path=cfg.logging.log_path)

    try:
        options = build_options(expected)
    except OptionParseError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--sum'") from exc

    acquirer = build_acquirer(cfg)
    try:
        digest_images(
            images,
            options,
            algorithm,
            acquire=acquirer.acquire,
            emit=typer.echo,
            chunk_size=cfg.digest.chunk_size,
            max_images=cfg.digest.max_images,
        )
    except OptionParseError as exc:
        raise typer.BadParameter(str(exc), param_hint="IMAGE...") from exc
    except VerificationMismatch as exc:
        typer.echo(f"{algorithm.name}sum: {exc}", err=True)
        raise typer.Exit(code=EXIT_MISMATCH) from exc
    except NothingVerified as exc:
        typer.echo(f"{algorithm.name}sum: {exc}", err=True)
        raise typer.Exit(code=EXIT_NOTHING_VERIFIED) from exc


@app.command()
def md5sum(
    images: List[str] = typer.Argument(..., help=_IMAGES_HELP),
    expected: Optional[str] = typer.Option(None, "--sum", "-s", help=_SUM_HELP),
    config: Optional[Path] = typer.Option(None, "--config", help=_CONFIG_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
) -> None:
    """Print or verify MD5 digests."""

    _digest_exec(MD5, images, expected, config, verbose)


@app.command()
def sha1sum(
    images: List[str] = typer.Argument(..., help=_IMAGES_HELP),
    expected: Optional[str] = typer.Option(None, "--sum", "-s", help=_SUM_HELP),
    config: Optional[Path] = typer.Option(None, "--config", help=_CONFIG_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
) -> None:
    """Print or verify SHA-1 digests."""

    _digest_exec(SHA1, images, expected, config, verbose)


@app.command()
def sha256sum(
    images: List[str] = typer.Argument(..., help=_IMAGES_HELP),
    expected: Optional[str] = typer.Option(None, "--sum", "-s", help=_SUM_HELP),
    config: Optional[Path] = typer.Option(None, "--config", help=_CONFIG_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
) -> None:
    """Print or verify SHA-256 digests."""

    _digest_exec(SHA256, images, expected, config, verbose)


@app.command()
def dump_config(
    dest: Path = typer.Argument(..., help="Destination file (.yaml or .json)"),
) -> None:
    """Write the default configuration to DEST."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["EXIT_MISMATCH", "EXIT_NOTHING_VERIFIED", "app", "build_acquirer", "main"]
