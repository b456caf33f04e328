# plain_notes/vault/filesystem.py

from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path

log = logging.getLogger(__name__)

TMP_PREFIX = ".tmp-"


def temp_name() -> str:
    """Temp file name for atomic writes: fixed length, independent of the target name."""
    return f"{TMP_PREFIX}{uuid.uuid4().hex}"


def atomic_write_text(
    path: Path,
    text: str,
    *,
    encoding: str = "utf-8",
) -> None:
    """
    Atomic-ish file write:
    - write to temp file in same directory
    - fsync
    - replace()

    The target is either the old file or the complete new one, never a
    truncated mix. Errors propagate after the temp file is cleaned up.
    """
    path = Path(path)
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)

    tmp_path = parent / temp_name()
    created = False
    replaced = False

    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            created = True
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
        replaced = True
    finally:
        if created and not replaced:
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError:
                log.warning("Could not remove temp file %s", tmp_path, exc_info=True)
