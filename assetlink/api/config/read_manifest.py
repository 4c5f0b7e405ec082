"""Read a JSON manifest file."""

import json
from pathlib import Path
from typing import Any


def read_manifest(path: Path) -> dict[str, Any]:
    """Read and decode a manifest.

    Raises:
        ValueError: If the file is missing, unreadable, not JSON, or not a JSON object
    """
    if not path.is_file():
        raise ValueError(f"Manifest not found at {path}")

    try:
        with path.open(encoding="utf-8") as fh:
            raw = json.load(fh)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in manifest {path}: {e}") from e
    except OSError as e:
        raise ValueError(f"Unable to read manifest {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Manifest {path} must contain a JSON object")
    return raw
