"""Small file helpers shared by the caches and the retry queue."""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def read_text_or_empty(path: Path) -> str:
    """Read a file, treating a missing or unreadable file as empty."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {path}: {e}")
        return ""


def atomic_write_text(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` via a temp file and rename.

    Readers never see a half-written file. This does not serialize
    concurrent writers: the last rename wins.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
