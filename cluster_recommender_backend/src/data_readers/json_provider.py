"""JSON data provider for static datasets in data/ directory.

Caches files in-memory to minimize I/O. Validates basic shapes where useful.

- Validate input filename to prevent path traversal.
- Raise DatasetError on missing or malformed files; callers decide the status.
"""
from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List


DATA_EXT = ".json"
REGIONS_DATASET = "regions.json"


class DatasetError(Exception):
    """Dataset missing, unreadable or of the wrong shape."""


def _validate_filename(name: str) -> str:
    if "/" in name or "\\" in name or ".." in name:
        raise DatasetError(f"Invalid dataset name: {name}")
    if not name.endswith(DATA_EXT):
        raise DatasetError(f"Dataset must be a .json file: {name}")
    return name


@lru_cache(maxsize=64)
def load_dataset(data_dir: str, name: str) -> Dict[str, Any]:
    """Load a JSON dataset by filename from the given data directory."""
    fname = _validate_filename(name)
    path = Path(data_dir).resolve() / fname
    if not path.exists():
        raise DatasetError(f"Dataset not found: {fname}")
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise DatasetError(f"Dataset parse error: {fname}: {exc}") from exc


def get_region_catalog(data_dir: str) -> Dict[str, Dict[str, List[str]]]:
    """Return the provider -> region -> zones mapping."""
    data = load_dataset(data_dir, REGIONS_DATASET)
    if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
        raise DatasetError(f"Dataset {REGIONS_DATASET} must map providers to region objects")
    return data
