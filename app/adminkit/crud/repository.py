"""Repository abstraction used by BaseService, with an in-memory implementation."""

import threading
from datetime import datetime, timezone
from typing import Dict, Generic, List, Optional, Protocol, TypeVar

from adminkit.crud.entity import BaseEntity

E = TypeVar("E", bound=BaseEntity)


class Repository(Protocol[E]):
    """Storage operations a CRUD service delegates to."""

    def get(self, entity_id: int) -> Optional[E]: ...

    def list(self) -> List[E]: ...

    def insert(self, entity: E) -> E: ...

    def update(self, entity: E) -> bool: ...

    def delete(self, entity_id: int) -> bool: ...

    def count(self) -> int: ...


class InMemoryRepository(Generic[E]):
    """Dict-backed repository with auto-increment ids.

    Entities are stored and returned as copies, so callers cannot mutate
    stored state without going through update(). Safe for concurrent use.
    """

    def __init__(self):
        self._rows: Dict[int, E] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get(self, entity_id: int) -> Optional[E]:
        with self._lock:
            row = self._rows.get(entity_id)
            return row.model_copy(deep=True) if row is not None else None

    def list(self) -> List[E]:
        with self._lock:
            return [row.model_copy(deep=True) for _, row in sorted(self._rows.items())]

    def insert(self, entity: E) -> E:
        """Store a new entity, assigning its id and timestamps.

        Raises:
            ValueError: If an entity with the same id already exists.
        """
        now = datetime.now(timezone.utc)
        with self._lock:
            if entity.id is None:
                entity.id = self._next_id
            elif entity.id in self._rows:
                raise ValueError(f"Entity with id {entity.id} already exists")
            self._next_id = max(self._next_id, entity.id + 1)
            entity.created_at = entity.created_at or now
            entity.updated_at = now
            self._rows[entity.id] = entity.model_copy(deep=True)
        return entity

    def update(self, entity: E) -> bool:
        if entity.id is None:
            return False
        with self._lock:
            existing = self._rows.get(entity.id)
            if existing is None:
                return False
            entity.created_at = existing.created_at
            entity.updated_at = datetime.now(timezone.utc)
            self._rows[entity.id] = entity.model_copy(deep=True)
        return True

    def delete(self, entity_id: int) -> bool:
        with self._lock:
            return self._rows.pop(entity_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._rows)
