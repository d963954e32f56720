# prd_zero/generators/files.py
"""Output file naming and session directories."""

import json
import logging
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S"


def generate_file_name(prefix: str, extension: str, now: datetime = None) -> str:
    """Return ``{prefix}_{timestamp}.{extension}`` with a filesystem-safe timestamp."""
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return f"{prefix}_{timestamp}.{extension}"


def create_session_directory(base: Path, now: datetime = None) -> Path:
    """Create and return a fresh ``session_<timestamp>`` directory under base."""
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    session_dir = Path(base) / f"session_{timestamp}"
    session_dir.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Ensured directory exists: {session_dir}")
    return session_dir


def write_text(path: Path, content: str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info(f"File saved: {path}")
    return path


def write_json(path: Path, data) -> Path:
    return write_text(path, json.dumps(data, indent=2, default=str))
