import logging

from sqlalchemy.orm import Session

from offset_pagination.db.models.customer import Customer
from offset_pagination.repositories.customer_repo import CustomerRepository
from offset_pagination.utils.pagination import OffsetLimitPaginator

logger = logging.getLogger(__name__)


class CustomerService:
    def __init__(self, db: Session) -> None:
        self._db = db
        self._repo = CustomerRepository(db)

    def create_customer(self, *, name: str) -> Customer:
        customer = self._repo.create(Customer(name=name))
        self._db.commit()
        self._db.refresh(customer)
        return customer

    def list_customers(
        self,
        *,
        paginator: OffsetLimitPaginator,
        with_count: bool = False,
    ) -> tuple[list[Customer], int | None]:
        items = self._repo.list(constraints=paginator.query_constraints())
        count = self._repo.count() if with_count else None
        logger.debug(f"Customers listed. offset={paginator.offset} limit={paginator.limit} returned={len(items)}")
        return items, count
