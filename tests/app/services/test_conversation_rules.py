"""Tests for the conversation rule engine."""

import pytest

from app.constants.chat import ConversationType, StaffRole
from app.models.staff import Staff
from app.services.abilities.rules import (
    NoAccess,
    TypeScoped,
    Unrestricted,
    allowed_conversation_types,
    can_view_customers,
    conversation_clauses,
    get_conversation_rules,
    message_clauses,
)


def staff(role):
    return Staff(id=1, display_name="x", role=role)


@pytest.mark.parametrize("role", [StaffRole.ADMIN, StaffRole.SUPERVISOR])
def test_unrestricted_roles(role):
    assert get_conversation_rules(staff(role)) == Unrestricted()
    assert conversation_clauses(staff(role)) == []
    assert message_clauses(staff(role)) == []
    assert allowed_conversation_types(staff(role)) == frozenset(ConversationType)


def test_agent_is_scoped_to_customer_conversations():
    rule = get_conversation_rules(staff(StaffRole.AGENT))
    assert rule == TypeScoped(frozenset({ConversationType.CUSTOMER}))
    assert allowed_conversation_types(staff(StaffRole.AGENT)) == {
        ConversationType.CUSTOMER
    }
    assert len(message_clauses(staff(StaffRole.AGENT))) == 1


def test_member_is_scoped_to_internal_conversations():
    assert allowed_conversation_types(staff(StaffRole.MEMBER)) == {
        ConversationType.INTERNAL
    }


@pytest.mark.parametrize("role", [StaffRole.DISABLED.value, "intern", None])
def test_disabled_or_unknown_roles_see_nothing(role):
    assert isinstance(get_conversation_rules(staff(role)), NoAccess)
    assert allowed_conversation_types(staff(role)) == frozenset()
    assert can_view_customers(staff(role)) is False


def test_rules_follow_current_role():
    member = staff(StaffRole.MEMBER)
    assert isinstance(get_conversation_rules(member), TypeScoped)
    member.role = StaffRole.ADMIN.value
    assert isinstance(get_conversation_rules(member), Unrestricted)


@pytest.mark.parametrize(
    "role, expected",
    [
        (StaffRole.ADMIN, True),
        (StaffRole.SUPERVISOR, True),
        (StaffRole.AGENT, True),
        (StaffRole.MEMBER, False),
    ],
)
def test_can_view_customers(role, expected):
    assert can_view_customers(staff(role)) is expected
