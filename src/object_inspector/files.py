"""JSON and raw file helpers.

``load_json``, ``save_json`` and ``remove_by_path`` report failure through
their return value (or not at all) and log the cause; ``save_raw`` and
``remove_file`` let ``OSError`` propagate.
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Any

__all__ = [
    "full_path",
    "load_json",
    "remove_by_path",
    "remove_file",
    "save_json",
    "save_raw",
]

logger = logging.getLogger(__name__)

_PACKAGE_DIR = Path(__file__).resolve().parent


def full_path(path: str | Path, base: str | Path | None = None) -> Path:
    """Resolve ``path`` against ``base`` (default: this package's directory).

    Absolute paths are returned resolved but otherwise unchanged.
    """
    root = Path(base) if base is not None else _PACKAGE_DIR
    return (root / path).resolve()


def load_json(path: str | Path) -> Any | None:
    """Return the parsed JSON document at ``path``, or None if it cannot be read.

    Args:
        path: File to read (UTF-8).

    Returns:
        The decoded document, or ``None`` when the file is missing, unreadable
        or not valid JSON.
    """
    try:
        with Path(path).open(encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, ValueError):
        logger.debug("Could not load JSON from %s", path, exc_info=True)
        return None


def save_json(obj: Any, path: str | Path) -> bool:
    """Write ``obj`` to ``path`` as tab-indented JSON.

    Returns:
        True on success; False when ``obj`` is not serialisable or the file
        cannot be written.
    """
    try:
        text = json.dumps(obj, indent="\t")
        Path(path).write_text(text, encoding="utf-8")
    except (OSError, TypeError, ValueError):
        logger.warning("Could not save JSON to %s", path, exc_info=True)
        return False
    return True


def save_raw(path: str | Path, data: bytes | str) -> None:
    """Write ``data`` to ``path`` unchanged (bytes as-is, str as UTF-8)."""
    target = Path(path)
    if isinstance(data, str):
        target.write_text(data, encoding="utf-8")
    else:
        target.write_bytes(data)


def remove_file(path: str | Path) -> None:
    """Delete the file at ``path``."""
    Path(path).unlink()


def remove_by_path(path: str | Path) -> None:
    """Delete a file, or a directory with everything under it.

    Best-effort: failures (including a missing path) are logged at DEBUG and
    otherwise ignored.
    """
    target = Path(path)
    try:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
    except OSError:
        logger.debug("Could not remove %s", target, exc_info=True)
