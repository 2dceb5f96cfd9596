"""
Loading raw schedule payloads from JSON files.

The payload is plain data (see scheduledata.transform for the accepted
shapes); this module only reads it from disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from scheduledata.config import DEFAULT_DATA_PATH
from scheduledata.errors import PayloadLoadError

logger = logging.getLogger(__name__)


def load_payload(path: str | Path | None = None) -> Any:
    """
    Read a JSON payload. Raises PayloadLoadError if the file is missing or broken.
    """
    payload_path = Path(path) if path is not None else DEFAULT_DATA_PATH

    try:
        text = payload_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise PayloadLoadError(payload_path, "file not found") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise PayloadLoadError(payload_path, str(exc)) from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PayloadLoadError(payload_path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    logger.debug("Loaded payload from %s", payload_path)
    return payload


def load_payload_or_empty(path: str | Path | None = None) -> Any:
    """
    Like load_payload, but never raises: problems are logged and {} is returned.
    """
    try:
        return load_payload(path)
    except PayloadLoadError as exc:
        logger.error("%s", exc)
        return {}
