"""Scoped temp-file staging for uploaded payloads."""

from __future__ import annotations

import tempfile
import uuid
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

from loguru import logger

from food_classifier.errors import ResourceError


@contextmanager
def staged_upload(
    chunks: Iterable[bytes],
    suffix: str = ".jpg",
    prefix: str = "temp_uploads",
) -> Iterator[Path]:
    """Write ``chunks`` to a uniquely named file in a private temp directory.

    Yields the file path.  The directory and everything in it are removed
    when the ``with`` block exits, including on error.

    Raises:
        ResourceError: If the directory or file cannot be created or written.
    """
    try:
        upload_dir = tempfile.TemporaryDirectory(prefix=prefix)
    except OSError as exc:
        logger.error(f"Failed to create temporary directory: {exc}")
        raise ResourceError("Could not create temp directory") from exc

    with upload_dir as dirname:
        path = Path(dirname) / f"{uuid.uuid4()}{suffix}"
        try:
            with open(path, "wb") as f:
                for chunk in chunks:
                    f.write(chunk)
        except OSError as exc:
            logger.error(f"Failed to write upload to {path}: {exc}")
            raise ResourceError("Could not write to file") from exc
        yield path
