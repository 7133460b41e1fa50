"""Helpers for small JSON documents kept on local disk."""

import json
from pathlib import Path

from ggdevlog.errors import StoreError


def write_json(path: Path, data: object) -> None:
    """Write ``data`` as pretty-printed JSON, creating parent directories."""
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), "utf-8")
        tmp_path.replace(path)
    except OSError as exc:
        raise StoreError(f"Failed to write {path.name}") from exc


def read_json(path: Path, default: object) -> object:
    """Read a JSON document, seeding the file with ``default`` when missing."""
    if not path.exists():
        write_json(path, default)
        return default
    try:
        return json.loads(path.read_text("utf-8"))
    except (OSError, ValueError) as exc:
        raise StoreError(f"Failed to read {path.name}") from exc
