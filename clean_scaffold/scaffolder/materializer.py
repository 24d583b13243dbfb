"""Filesystem materialization of planned writes.

Creates directories and writes files that do not exist yet.  Existing files
are never overwritten, which makes every command safe to re-run.  Entries are
processed strictly in order; the first I/O error aborts the batch and leaves
earlier writes in place.
"""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable

from .errors import WriteFailedError
from .models import PlannedWrite, ScaffoldReport

logger = logging.getLogger(__name__)


class Materializer:
    """Applies ``PlannedWrite`` entries to the filesystem."""

    async def materialize(self, planned_writes: Iterable[PlannedWrite]) -> ScaffoldReport:
        """Ensure every planned directory and file exists.

        Args:
            planned_writes: Ordered directory and file entries.

        Returns:
            A report listing created and skipped paths.

        Raises:
            WriteFailedError: An entry could not be created.  Paths created
                before it are listed on ``error.created``.
        """
        report = ScaffoldReport()
        for entry in planned_writes:
            try:
                if entry.is_directory:
                    created = await asyncio.to_thread(_ensure_dir, entry.path)
                else:
                    created = await asyncio.to_thread(
                        _write_if_absent, entry.path, entry.content or ""
                    )
            except OSError as exc:
                logger.debug("Write failed for %s: %s", entry.path, exc)
                raise WriteFailedError(
                    entry.path, exc.strerror or str(exc), created=report.created
                ) from exc

            if created:
                logger.debug("Created %s", entry.path)
                report.created.append(entry.path)
            else:
                logger.debug("Skipped existing %s", entry.path)
                report.skipped.append(entry.path)
        return report


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _ensure_dir(path: Path) -> bool:
    """Create *path* and its parents.  Returns ``False`` if it already existed."""
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    return True


def _write_if_absent(path: Path, content: str) -> bool:
    """Write *content* to *path* unless something is already there.

    The content goes to a temporary sibling first and is hard-linked into
    place, so the target is either complete or absent.  Linking fails on an
    existing target, including one created after the ``exists()`` check.
    """
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
        os.link(tmp_name, path)
    except FileExistsError:
        return False
    finally:
        Path(tmp_name).unlink(missing_ok=True)
    return True
