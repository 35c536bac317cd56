"""Append-only log of launch failures."""

import logging
from pathlib import Path

log = logging.getLogger("edbootstrap")


def format_error(target: str, message: str) -> str:
    return f"Bootstrapper Error {target}: {message}"


def write_error(path: Path, target: str, message: str) -> None:
    """Append a failure line to ``path``. Write failures are only logged."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(format_error(target, message) + "\n")
    except OSError as e:
        log.warning("Couldn't write to %s: %s", path, e)
