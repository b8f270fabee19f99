"""Generic CRUD base service.

Exports:
    BaseEntity: Base pydantic model for persisted entities
    Repository: Storage protocol a service delegates to
    InMemoryRepository: Dict-backed Repository
    BaseService: Generic CRUD service
"""

from adminkit.crud.entity import BaseEntity
from adminkit.crud.repository import InMemoryRepository, Repository
from adminkit.crud.service import BaseService

__all__ = ["BaseEntity", "Repository", "InMemoryRepository", "BaseService"]
