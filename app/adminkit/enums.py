"""Label-bearing enumerations.

Members carry a stored value and a human-readable label, which message
resolution uses as the display text when no catalog entry exists:

    class UserType(LabeledEnum):
        ADMIN = (1, "Administrator")
        MEMBER = (2, "Member")

    UserType.ADMIN.value   # 1
    UserType.ADMIN.label   # "Administrator"
    UserType.of(2)         # UserType.MEMBER
"""

from enum import Enum
from typing import Any, List, Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class HasLabel(Protocol):
    """Anything exposing an intrinsic human-readable label."""

    label: str


class LabeledEnum(Enum):
    """Enum whose members are declared as ``(value, label)`` pairs."""

    def __new__(cls, value: Any, label: str):
        obj = object.__new__(cls)
        obj._value_ = value
        obj.label = label
        return obj

    @classmethod
    def of(cls, value: Any) -> Optional["LabeledEnum"]:
        """Member whose value equals ``value``, or None."""
        for member in cls:
            if member.value == value:
                return member
        return None

    @classmethod
    def choices(cls) -> List[Tuple[Any, str]]:
        return [(member.value, member.label) for member in cls]
