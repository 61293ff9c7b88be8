from typing import Iterable, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from offset_pagination.core.enums import ConstraintKind
from offset_pagination.utils.constraints import QueryConstraint

T = TypeVar("T")


def apply_constraints(stmt: Select, constraints: Iterable[QueryConstraint]) -> Select:
    for c in constraints:
        if c.kind == ConstraintKind.LIMIT:
            stmt = stmt.limit(c.value)
        elif c.kind == ConstraintKind.OFFSET:
            stmt = stmt.offset(c.value)
        else:
            raise ValueError(f"Unsupported constraint. kind={c.kind}")
    return stmt


def slice_rows(rows: Sequence[T], constraints: Iterable[QueryConstraint]) -> list[T]:
    limit: int | None = None
    offset = 0
    for c in constraints:
        if c.kind == ConstraintKind.LIMIT:
            limit = c.value
        elif c.kind == ConstraintKind.OFFSET:
            offset = c.value
        else:
            raise ValueError(f"Unsupported constraint. kind={c.kind}")
    stop = None if limit is None else offset + limit
    return list(rows[offset:stop])


def count_rows(db: Session, stmt: Select) -> int:
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    return int(db.scalar(count_stmt) or 0)
