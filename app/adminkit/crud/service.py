"""Generic CRUD base service.

Services for concrete entities subclass BaseService and add their own
business operations on top of the delegated CRUD methods:

    class NoticeService(BaseService[Notice]):
        def publish(self, notice_id: int) -> bool:
            ...

Write methods return booleans rather than raising for missing rows.
"""

from typing import Generic, Iterable, List, Optional

from adminkit.crud.repository import E, Repository
from adminkit.logging import get_module_logger

logger = get_module_logger()


class BaseService(Generic[E]):
    """CRUD operations delegated to a Repository.

    Attributes:
        repository: Repository holding the entities.
    """

    def __init__(self, repository: Repository[E]):
        self.repository = repository
        self.log = logger.bind(service=type(self).__name__)

    def get_by_id(self, entity_id: int) -> Optional[E]:
        return self.repository.get(entity_id)

    def list_all(self) -> List[E]:
        return self.repository.list()

    def list_by_ids(self, entity_ids: Iterable[int]) -> List[E]:
        """Entities for the given ids, in the given order, skipping unknown ids."""
        found = []
        for entity_id in entity_ids:
            entity = self.repository.get(entity_id)
            if entity is not None:
                found.append(entity)
        return found

    def count(self) -> int:
        return self.repository.count()

    def save(self, entity: E) -> bool:
        """Insert a new entity. The assigned id is written back to ``entity``."""
        try:
            self.repository.insert(entity)
        except ValueError as e:
            self.log.warning("entity_save_rejected", entity_id=entity.id, error=str(e))
            return False
        self.log.info("entity_saved", entity_id=entity.id)
        return True

    def save_batch(self, entities: Iterable[E]) -> bool:
        """Insert every entity; True only if all inserts succeeded."""
        results = [self.save(entity) for entity in entities]
        return all(results)

    def update_by_id(self, entity: E) -> bool:
        updated = self.repository.update(entity)
        if updated:
            self.log.info("entity_updated", entity_id=entity.id)
        else:
            self.log.warning("entity_update_missed", entity_id=entity.id)
        return updated

    def save_or_update(self, entity: E) -> bool:
        """Update when ``entity.id`` names an existing row, insert otherwise."""
        if entity.id is not None and self.repository.get(entity.id) is not None:
            return self.update_by_id(entity)
        return self.save(entity)

    def remove_by_id(self, entity_id: int) -> bool:
        removed = self.repository.delete(entity_id)
        if removed:
            self.log.info("entity_removed", entity_id=entity_id)
        return removed
