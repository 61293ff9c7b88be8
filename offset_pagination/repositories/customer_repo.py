from typing import Iterable

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from offset_pagination.db.models.customer import Customer
from offset_pagination.repositories.query_writer import apply_constraints, count_rows
from offset_pagination.utils.constraints import QueryConstraint


class CustomerRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def create(self, customer: Customer) -> Customer:
        self._db.add(customer)
        self._db.flush()
        return customer

    def _base_query(self) -> Select:
        return select(Customer).order_by(Customer.id.asc())

    def list(self, *, constraints: Iterable[QueryConstraint]) -> list[Customer]:
        stmt = apply_constraints(self._base_query(), constraints)
        return list(self._db.execute(stmt).scalars().all())

    def count(self) -> int:
        return count_rows(self._db, self._base_query())
