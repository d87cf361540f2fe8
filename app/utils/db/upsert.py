"""
Keyed insert-or-ignore on a unique constraint.

The store's unique constraint is the only coordination between concurrent
writers: a losing INSERT becomes a no-op and the caller re-reads the winner.
"""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def insert_or_ignore(
    db: Session,
    model: type,
    values: dict[str, Any],
    index_elements: Sequence[str],
) -> bool:
    """
    INSERT ... ON CONFLICT (index_elements) DO NOTHING, then commit.

    `values` are keyed by column name (e.g. "metadata", not "metadata_").

    Returns True when this call created the row.
    """
    dialect = db.get_bind().dialect.name
    insert = _DIALECT_INSERTS.get(dialect)
    if insert is None:
        raise NotImplementedError(f"Keyed upsert is not supported on {dialect!r}")
    stmt = insert(model.__table__).values(**values).on_conflict_do_nothing(
        index_elements=list(index_elements)
    )
    result = db.execute(stmt)
    db.commit()
    return bool(result.rowcount)
