"""Writing, reading back and sizing files."""

import os
from pathlib import Path

__all__ = ["write_and_read", "file_size"]


def write_and_read(path: str | os.PathLike, text: str) -> str:
    """Save ``text`` to ``path``, then read the file back and return its content."""
    target = Path(path)
    with target.open("w", encoding="utf-8") as handle:
        handle.write(text)
    with target.open("r", encoding="utf-8") as handle:
        return handle.read()


def file_size(path: str | os.PathLike) -> int:
    """Return the size of the file at ``path`` in bytes."""
    with open(path, "rb") as handle:
        handle.seek(0, os.SEEK_END)
        return handle.tell()