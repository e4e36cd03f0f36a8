"""Copy-on-write replacement of a single file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_TEMP_SUFFIX = "_"


class ContentTransform(Protocol):
    """Produces the new content of a file from its current content."""

    def produce(self, original: str) -> str: ...


def temp_path_for(original: Path, suffix: str = DEFAULT_TEMP_SUFFIX) -> Path:
    """Return the sibling path used while ``original`` is being rewritten."""
    return original.with_name(original.name + suffix)


def cowfile(
    original: Path,
    transform: ContentTransform,
    *,
    suffix: str = DEFAULT_TEMP_SUFFIX,
    cleanup_on_failure: bool = False,
) -> None:
    """Rewrite ``original`` through ``transform`` without exposing partial writes.

    The new content is written to ``original`` + ``suffix``, synced to disk and
    renamed over the original. The temp file is opened exclusively, so a stale
    temp file from an earlier crashed run (or a concurrent run) makes this
    call fail instead of being overwritten.

    Args:
        original: File to rewrite.
        transform: Strategy that maps the old content to the new content.
        suffix: Marker appended to the file name to build the temp path.
        cleanup_on_failure: Remove the temp file when the transform or the
            write fails. By default it is left behind for inspection.

    Raises:
        FileExistsError: If the temp file already exists.
        OSError: For any read, write, sync or rename failure.
        Exception: Whatever ``transform.produce`` raises, unchanged.
    """
    # newline="" keeps CRLF files byte-identical outside the inserted line
    with original.open(encoding="utf-8", newline="") as handle:
        contents = handle.read()

    temp_path = temp_path_for(original, suffix)
    logger.debug("rewriting %s via %s", original, temp_path)
    with temp_path.open("x", encoding="utf-8", newline="") as temp_file:
        try:
            temp_file.write(transform.produce(contents))
            temp_file.flush()
            os.fsync(temp_file.fileno())
        except BaseException:
            if cleanup_on_failure:
                temp_file.close()
                temp_path.unlink(missing_ok=True)
                logger.debug("removed %s after failed rewrite", temp_path)
            else:
                logger.debug("left %s behind after failed rewrite", temp_path)
            raise

    os.replace(temp_path, original)
    logger.debug("replaced %s", original)
