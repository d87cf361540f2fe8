"""
Conversation visibility rules.

`get_conversation_rules(staff)` maps a staff member's role to one of three
rule variants. Rules compile to SQLAlchemy criteria which callers AND with
their own filters, so a caller filter can narrow a rule but never widen it.
Rules are recomputed on every call from the staff row as it is now.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Union

from sqlalchemy import and_, false

from app.constants.chat import ConversationType, StaffRole
from app.models.conversation import Conversation
from app.models.message import Message
from app.models.staff import Staff

ALL_CONVERSATION_TYPES = frozenset(ConversationType)


@dataclass(frozen=True)
class Unrestricted:
    """Sees every conversation."""

    def clauses(self) -> List[Any]:
        return []


@dataclass(frozen=True)
class TypeScoped:
    """Sees conversations of the listed types only."""

    types: frozenset

    def clauses(self) -> List[Any]:
        return [Conversation.type.in_(sorted(t.value for t in self.types))]


@dataclass(frozen=True)
class NoAccess:
    """Sees nothing."""

    def clauses(self) -> List[Any]:
        return [false()]


ConversationRule = Union[Unrestricted, TypeScoped, NoAccess]


_ROLE_RULES: dict[StaffRole, ConversationRule] = {
    StaffRole.ADMIN: Unrestricted(),
    StaffRole.SUPERVISOR: Unrestricted(),
    StaffRole.AGENT: TypeScoped(frozenset({ConversationType.CUSTOMER})),
    StaffRole.MEMBER: TypeScoped(frozenset({ConversationType.INTERNAL})),
    StaffRole.DISABLED: NoAccess(),
}

_CUSTOMER_VIEWERS = frozenset(
    {StaffRole.ADMIN, StaffRole.SUPERVISOR, StaffRole.AGENT}
)


def staff_role(staff: Staff) -> StaffRole:
    """Role of the staff member; unknown values degrade to DISABLED."""
    try:
        return StaffRole(staff.role)
    except ValueError:
        return StaffRole.DISABLED


def get_conversation_rules(staff: Staff) -> ConversationRule:
    return _ROLE_RULES[staff_role(staff)]


def conversation_clauses(staff: Staff) -> List[Any]:
    """Criteria restricting a Conversation query to what `staff` may see."""
    return get_conversation_rules(staff).clauses()


def message_clauses(staff: Staff) -> List[Any]:
    """Same rule applied to messages through their owning conversation."""
    clauses = conversation_clauses(staff)
    if not clauses:
        return []
    return [Message.conversation.has(and_(*clauses))]


def allowed_conversation_types(staff: Staff) -> frozenset:
    """Conversation types `staff` may be added to."""
    rule = get_conversation_rules(staff)
    if isinstance(rule, Unrestricted):
        return ALL_CONVERSATION_TYPES
    if isinstance(rule, TypeScoped):
        return rule.types
    return frozenset()


def can_view_customers(staff: Staff) -> bool:
    return staff_role(staff) in _CUSTOMER_VIEWERS
