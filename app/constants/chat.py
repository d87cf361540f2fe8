"""Enumerations shared by models, schemas and the rule engine."""

from enum import StrEnum


class ConversationType(StrEnum):
    """Audience of a conversation."""

    CUSTOMER = "customer"
    INTERNAL = "internal"


class AuthorType(StrEnum):
    """Who wrote a message."""

    STAFF = "staff"
    CUSTOMER = "customer"
    SYSTEM = "system"


class StaffRole(StrEnum):
    """Staff roles driving conversation visibility."""

    ADMIN = "admin"
    SUPERVISOR = "supervisor"
    AGENT = "agent"
    MEMBER = "member"
    DISABLED = "disabled"


class MessageOrder(StrEnum):
    """Sort direction for message listings (by creation time)."""

    ASC = "asc"
    DESC = "desc"
