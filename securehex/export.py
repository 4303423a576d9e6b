"""
Plain-text download artifact for a generated secret.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from .config import SecureHexError

logger = logging.getLogger(__name__)

# Suffixes tried before giving up on a free default file name.
MAX_NAME_ATTEMPTS = 1000


class ExportError(SecureHexError):
    """The secret could not be written to disk."""


def default_artifact_name(now: float | None = None) -> str:
    """
    password-<epoch milliseconds>.txt
    """
    if now is None:
        now = time.time()
    return f"password-{int(now * 1000)}.txt"


def _write_exclusive(path: Path, secret: str) -> None:
    with path.open("x", encoding="utf-8") as f:
        f.write(secret)


def write_secret_file(
    secret: str,
    directory: Path | str | None = None,
    filename: str | None = None,
    overwrite: bool = False,
) -> Path:
    """
    Write the secret, and nothing else, to a UTF-8 text file.

    The directory defaults to the current working directory. Existing files
    are never replaced unless overwrite is set: an explicit filename that is
    already taken raises ExportError, and a default name that is taken gets
    a "-<n>" suffix instead. Raises ExportError if the secret is empty or
    the file cannot be written.
    """
    if not secret:
        raise ExportError("No secret to save. Generate one first.")

    target_dir = Path(directory) if directory is not None else Path.cwd()

    if filename is not None:
        path = target_dir / filename
        try:
            if overwrite:
                path.write_text(secret, encoding="utf-8")
            else:
                _write_exclusive(path, secret)
        except FileExistsError as exc:
            raise ExportError(f"{path} already exists.") from exc
        except OSError as exc:
            raise ExportError(f"Could not write {path}: {exc}") from exc

        logger.debug("Wrote secret artifact to %s", path)
        return path

    stem = Path(default_artifact_name()).stem
    for n in range(MAX_NAME_ATTEMPTS):
        name = f"{stem}.txt" if n == 0 else f"{stem}-{n}.txt"
        path = target_dir / name
        try:
            _write_exclusive(path, secret)
        except FileExistsError:
            continue
        except OSError as exc:
            raise ExportError(f"Could not write {path}: {exc}") from exc

        logger.debug("Wrote secret artifact to %s", path)
        return path

    raise ExportError(
        f"No free file name for {stem}.txt in {target_dir} "
        f"after {MAX_NAME_ATTEMPTS} attempts."
    )
