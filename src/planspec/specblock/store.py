"""Backing store for plan documents.

The merge loop only needs two operations: read the whole text, and
replace the whole text. No locking is provided or expected.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Protocol


class DocumentStore(Protocol):
    def read_text(self, path: Path | str) -> str | None:
        """Return the full document text, or None if it does not exist."""

    def write_text(self, path: Path | str, text: str) -> int:
        """Replace the document and return the number of bytes written."""


# NamedTemporaryFile creates 0600 files
NEW_FILE_MODE = 0o644


class FileStore:
    """DocumentStore over the local filesystem (UTF-8).

    Writes go to a temporary file beside the target and are renamed over
    it, so a concurrent reader sees either the old or the new document,
    never a truncated one.
    """

    encoding = "utf-8"

    def read_text(self, path: Path | str) -> str | None:
        target = Path(path)
        try:
            return target.read_text(encoding=self.encoding)
        except FileNotFoundError:
            return None

    def write_text(self, path: Path | str, text: str) -> int:
        target = Path(path)
        data = text.encode(self.encoding)
        mode = target.stat().st_mode & 0o777 if target.exists() else NEW_FILE_MODE

        with tempfile.NamedTemporaryFile(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False,
        ) as tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        try:
            os.chmod(tmp.name, mode)
            os.replace(tmp.name, target)
        except OSError:
            os.unlink(tmp.name)
            raise
        return len(data)
