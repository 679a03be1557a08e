# record_store.py
from __future__ import annotations

import copy
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Mapping

from job_portal.errors import OperationFailedError


logger = logging.getLogger(__name__)


class RecordStore:
    """In-memory collection of one entity type.

    IDs are ``max(existing) + 1`` (or 1 when empty), so an ID freed by deleting
    the highest record is handed out again. Mutations and reads share one lock
    so a reader never sees a half-applied create/delete; returned records are
    copies.
    """

    def __init__(self, entity: str) -> None:
        self.entity = entity
        self._records: list[dict[str, Any]] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _next_id(self) -> int:
        if not self._records:
            return 1
        return max(int(record["id"]) for record in self._records) + 1

    def create(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        with self._lock:
            try:
                record = {"id": self._next_id()}
                record.update((k, copy.deepcopy(v)) for k, v in fields.items() if k != "id")
                self._records.append(record)
            except Exception as exc:
                raise OperationFailedError(
                    f"Failed to create {self.entity}",
                    details=f"{type(exc).__name__}: {exc}",
                ) from exc
            logger.info("%s.create id=%s", self.entity, record["id"])
            return copy.deepcopy(record)

    def delete(self, record_id: int) -> bool:
        with self._lock:
            for index, record in enumerate(self._records):
                if record["id"] == record_id:
                    del self._records[index]
                    logger.info("%s.delete id=%s", self.entity, record_id)
                    return True
        return False

    def get(self, record_id: int) -> dict[str, Any] | None:
        with self._lock:
            for record in self._records:
                if record["id"] == record_id:
                    return copy.deepcopy(record)
        return None

    def list(self) -> list[dict[str, Any]]:
        with self._lock:
            return copy.deepcopy(self._records)


@dataclass
class PortalStore:
    """Both collections, created once at start-up and handed to every handler."""

    profiles: RecordStore = field(default_factory=lambda: RecordStore("profile"))
    jobs: RecordStore = field(default_factory=lambda: RecordStore("job"))
