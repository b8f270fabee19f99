"""Current-user context model."""

from enum import Enum
from typing import Any, Dict, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field


class UserContext(BaseModel):
    """The signed-in user of the current request.

    A plain data holder populated by authentication middleware and read by
    services through UserContextHolder.
    """

    model_config = ConfigDict(use_enum_values=False, validate_assignment=True)

    user_id: Optional[int] = Field(default=None, description="User ID")
    user_name: Optional[str] = Field(default=None, description="Account name")
    user_phone_no: Optional[str] = Field(default=None, description="Phone number")
    user_type: Optional[Enum] = Field(default=None, description="User type")
    roles_ids: Set[int] = Field(
        default_factory=set, description="IDs of roles held, e.g. {1, 2, 3}"
    )
    roles: List[str] = Field(
        default_factory=list,
        description="Names of roles held, e.g. ['SuperAdmin', 'Admin']",
    )
    extra_data: Dict[str, Any] = Field(
        default_factory=dict, description="Additional data"
    )
    client_ip: Optional[str] = Field(default=None, description="Client IP address")
