"""
One-JSON-file-per-record directory store shared by the repositories.
"""

import json
from pathlib import Path
from threading import RLock
from typing import Any, Dict, List, Optional

from contentcraft.core import InfrastructureError, get_logger, is_safe_record_id

logger = get_logger(__name__, component="json_store")


class JsonRecordStore:
    """Reads and writes `<id>.json` documents under a directory.

    All operations hold an RLock so concurrent requests never interleave
    writes to the same file. Unsafe IDs are treated as absent.
    """

    def __init__(self, storage_dir: Path):
        self._storage_dir = Path(storage_dir)
        self._storage_dir.mkdir(parents=True, exist_ok=True)
        self._lock = RLock()

    @property
    def lock(self) -> RLock:
        return self._lock

    def _record_file(self, record_id: str) -> Path:
        return self._storage_dir / f"{record_id}.json"

    def save(self, record_id: str, data: Dict[str, Any]) -> None:
        if not is_safe_record_id(record_id):
            raise InfrastructureError(f"Refusing to store record with unsafe ID: {record_id!r}")
        with self._lock:
            path = self._record_file(record_id)
            tmp_path = path.with_suffix(".json.tmp")
            try:
                with open(tmp_path, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                tmp_path.replace(path)
            except OSError as e:
                raise InfrastructureError(f"Failed to write record {record_id}: {e}") from e

    def load(self, record_id: str) -> Optional[Dict[str, Any]]:
        if not is_safe_record_id(record_id):
            return None
        with self._lock:
            return self._read(self._record_file(record_id))

    def delete(self, record_id: str) -> bool:
        if not is_safe_record_id(record_id):
            return False
        with self._lock:
            path = self._record_file(record_id)
            if not path.exists():
                return False
            path.unlink()
            return True

    def load_all(self) -> List[Dict[str, Any]]:
        with self._lock:
            records = (self._read(path) for path in sorted(self._storage_dir.glob("*.json")))
            return [data for data in records if data is not None]

    def _read(self, path: Path) -> Optional[Dict[str, Any]]:
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Skipping unreadable record", extra={"path": str(path), "error": str(e)})
            return None
        if not isinstance(data, dict):
            logger.warning("Skipping malformed record", extra={"path": str(path)})
            return None
        return data
