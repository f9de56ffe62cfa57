"""Append a spec name to a plan's Required Specs list without a lock.

Each attempt re-reads the plan, re-derives the list from the current
text, writes the whole document back, then reads it again to confirm
the name survived. Another writer may overwrite us between the write and
the confirmation read; in that case the attempt is repeated from a fresh
read. Nothing is carried over between attempts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from planspec.specblock import DEFAULT_ATTEMPTS, SPECS_END, SPECS_START
from planspec.specblock.codec import parse_entries, render_entries, unique_entries
from planspec.specblock.locator import find_section
from planspec.specblock.normalize import collapse_end_markers, split_end_marker
from planspec.specblock.store import DocumentStore, FileStore

logger = logging.getLogger(__name__)

# Failure reasons
MISSING_DOCUMENT = "missing document"
MISSING_SECTION = "missing section"
INVALID_ENTRY = "invalid entry"
WRITE_FAILED = "write failed"
CONCURRENT_UPDATES = "concurrent updates"


@dataclass(frozen=True)
class MergeResult:
    """Outcome of a merge_entry call.

    ``changed`` is True when this call wrote the document at least once.
    """

    ok: bool
    reason: str | None = None
    attempts: int = 0
    changed: bool = False


def _has_marker(name: str) -> bool:
    return SPECS_START in name or SPECS_END in name


def merge_entry(
    path: Path | str,
    entry: str,
    attempts: int = DEFAULT_ATTEMPTS,
    store: DocumentStore | None = None,
) -> MergeResult:
    """Ensure ``entry`` is listed in the specs section of the document at ``path``.

    Args:
        path: Document key passed to the store.
        entry: Spec name to add. Surrounding whitespace is ignored; names
            spanning lines or containing a marker are rejected.
        attempts: Maximum read/write/verify cycles before giving up.
        store: Backing store. Defaults to the local filesystem.

    Returns:
        MergeResult. ``ok`` is True when the entry was already present or
        was confirmed present after our write. Failures carry a reason:
        ``missing document``, ``missing section``, ``invalid entry``,
        ``write failed`` or ``concurrent updates``.
    """
    if store is None:
        store = FileStore()
    name = entry.strip() if isinstance(entry, str) else ""
    if not name or "\n" in name or "\r" in name or _has_marker(name):
        return MergeResult(ok=False, reason=INVALID_ENTRY)

    for attempt in range(1, attempts + 1):
        logger.debug("merge %r into %s: attempt %d/%d", name, path, attempt, attempts)

        current = store.read_text(path)
        if current is None:
            return MergeResult(ok=False, reason=MISSING_DOCUMENT, attempts=attempt)

        section = find_section(current)
        if section is None:
            return MergeResult(ok=False, reason=MISSING_SECTION, attempts=attempt)

        existing = parse_entries(section.middle)
        if name in existing:
            # Ours or another writer's: either way, nothing left to do
            return MergeResult(ok=True, attempts=attempt, changed=attempt > 1)

        body = render_entries([*existing, name])
        tail = split_end_marker(collapse_end_markers(section.after))
        candidate = f"{section.before}\n{body}\n{SPECS_END}{tail}"

        if store.write_text(path, candidate) == 0:
            logger.warning("merge %r into %s: write reported 0 bytes", name, path)
            return MergeResult(ok=False, reason=WRITE_FAILED, attempts=attempt)

        verify = store.read_text(path)
        verify_section = find_section(verify) if verify is not None else None
        if verify_section is None:
            return MergeResult(ok=False, reason=MISSING_SECTION, attempts=attempt)
        if name in parse_entries(verify_section.middle):
            logger.info("merged %r into %s", name, path)
            return MergeResult(ok=True, attempts=attempt, changed=True)

        logger.warning(
            "merge %r into %s: overwritten by a concurrent writer, retrying",
            name, path,
        )

    return MergeResult(ok=False, reason=CONCURRENT_UPDATES, attempts=attempts)


def read_entries(
    path: Path | str,
    store: DocumentStore | None = None,
) -> list[str] | None:
    """Return the de-duplicated spec names listed in a document.

    None when the document does not exist or has no specs section.
    """
    if store is None:
        store = FileStore()
    content = store.read_text(path)
    if content is None:
        return None
    section = find_section(content)
    if section is None:
        return None
    return unique_entries(parse_entries(section.middle))
