"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    UserType,
    Weekday,
    make_message_catalog,
    make_resolver,
    make_static_catalog,
)
from tests.factories.users import make_user_context
from tests.factories.crud import Notice, make_notice

__all__ = [
    "UserType",
    "Weekday",
    "make_message_catalog",
    "make_resolver",
    "make_static_catalog",
    "make_user_context",
    "Notice",
    "make_notice",
]
