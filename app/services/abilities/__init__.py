from app.services.abilities.abilities import Abilities
from app.services.abilities.customer_abilities import CustomerAbilities
from app.services.abilities.helpers import Pagination, compact, normalize_pages
from app.services.abilities.rules import (
    allowed_conversation_types,
    can_view_customers,
    get_conversation_rules,
)

__all__ = [
    "Abilities",
    "CustomerAbilities",
    "Pagination",
    "allowed_conversation_types",
    "can_view_customers",
    "compact",
    "get_conversation_rules",
    "normalize_pages",
]
