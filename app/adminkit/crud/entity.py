"""Base entity model for CRUD services."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseEntity(BaseModel):
    """Base class for persisted entities.

    ``id`` is assigned by the repository on first insert; timestamps are
    maintained by the repository.
    """

    model_config = ConfigDict(
        use_enum_values=False,
        validate_assignment=True,
        from_attributes=True,
    )

    id: Optional[int] = Field(default=None, description="Primary key")
    created_at: Optional[datetime] = Field(default=None, description="Creation time")
    updated_at: Optional[datetime] = Field(default=None, description="Last update time")
