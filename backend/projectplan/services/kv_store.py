# backend/projectplan/services/kv_store.py
import json
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from ..models.record import KVRecord
from ..utils.logging import db_logger


class KeyValueStore:
    """Flat key-value namespace over the kv_records table.

    Every primitive touches exactly one key and commits on its own. Nothing
    here groups several keys into one transaction, so a caller that writes
    two records can be interrupted between them.
    """

    def __init__(self, db: Session):
        self.db = db

    def read_record(self, key: str) -> Optional[Any]:
        record = self.db.get(KVRecord, key)
        if record is None:
            db_logger.debug("Record miss", extra={"key": key})
            return None
        return json.loads(record.value)

    def write_record(self, key: str, payload: Any) -> None:
        value = json.dumps(payload)
        try:
            self.db.merge(KVRecord(key=key, value=value))
            self.db.commit()
        except Exception as e:
            db_logger.error("Failed to write record", extra={"key": key, "error": str(e)})
            self.db.rollback()
            raise
        db_logger.debug("Record written", extra={"key": key, "size": len(value)})

    def delete_record(self, key: str) -> bool:
        """Delete one key; returns False when there was nothing to delete"""
        try:
            record = self.db.get(KVRecord, key)
            if record is None:
                return False
            self.db.delete(record)
            self.db.commit()
        except Exception as e:
            db_logger.error("Failed to delete record", extra={"key": key, "error": str(e)})
            self.db.rollback()
            raise
        db_logger.debug("Record deleted", extra={"key": key})
        return True

    # List records are whole payloads: read, change, rewrite.

    def read_list(self, key: str) -> List[str]:
        payload = self.read_record(key)
        return list(payload) if payload else []

    def write_list(self, key: str, ids: List[str]) -> None:
        self.write_record(key, ids)
