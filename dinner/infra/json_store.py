"""Whole-file JSON persistence helpers shared by the repositories."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def read_json_file(path, default):
    """Load a JSON document, returning ``default`` when missing or unreadable."""
    path = Path(path)
    if not path.exists():
        return default
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
    except OSError as e:
        logger.error(f"Error reading {path}: {e}")
    return default


def write_json_file(path, data) -> bool:
    """Atomically replace ``path`` with ``data``. Returns False on failure."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
    except OSError as e:
        logger.error(f"Error writing {path}: {e}")
        return False
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, path)
        return True
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Error writing {path}: {e}")
        return False
    finally:
        if os.path.exists(tmp_path):
            try:
                os.remove(tmp_path)
            except OSError:
                pass


__all__ = ['read_json_file', 'write_json_file']
