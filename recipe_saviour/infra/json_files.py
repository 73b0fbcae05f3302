import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import Lock
from typing import Any, List

logger = logging.getLogger(__name__)

# One lock for all store files; writes are rare and small
store_lock = Lock()


def read_json_list(path: Path) -> List[Any]:
    """Read a JSON array from disk; missing or corrupt files read as empty."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.info("Store file not found: %s. Starting empty.", path)
        return []
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", path, e)
        return []
    if not isinstance(data, list):
        logger.error("Expected a JSON array in %s, got %s", path, type(data).__name__)
        return []
    return data


def atomic_write_json(path: Path, data: Any) -> None:
    """Write JSON through a temp file in the same directory, then move it into place."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, str(path))
    finally:
        if os.path.exists(tmp_path):
            try:
                os.remove(tmp_path)
            except OSError as e:
                logger.warning("Could not remove temp file %s: %s", tmp_path, e)
