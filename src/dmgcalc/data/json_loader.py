"""Low-level JSON helpers for the class registry."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError, DataValidationError


def read_text(path: Path) -> str:
    """Read a definition file and raise DataLoadError on failure."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Definition file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise DataLoadError(f"Definition file is not valid UTF-8: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read definition file: {path}") from exc


def parse_json(text: str | bytes) -> object:
    """Decode JSON text and raise DataValidationError on malformed input."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DataValidationError(f"Invalid JSON: {exc}") from exc
