from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from offset_pagination.api.dependencies import get_paginator
from offset_pagination.db.session import get_db
from offset_pagination.schemas.customers import CustomerCreate, CustomerListRead, CustomerRead, PaginationRead
from offset_pagination.services.customer_service import CustomerService
from offset_pagination.utils.pagination import OffsetLimitPaginator

router = APIRouter(prefix="/customers", tags=["customers"])


def get_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(db)


@router.post("", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
def create_customer(payload: CustomerCreate, svc: CustomerService = Depends(get_service)) -> CustomerRead:
    customer = svc.create_customer(name=payload.name)
    return CustomerRead.model_validate(customer)


@router.get("", response_model=CustomerListRead)
def list_customers(
    fetch_count: bool = Query(False),
    paginator: OffsetLimitPaginator = Depends(get_paginator),
    svc: CustomerService = Depends(get_service),
) -> CustomerListRead:
    items, count = svc.list_customers(paginator=paginator, with_count=fetch_count)
    return CustomerListRead(
        items=[CustomerRead.model_validate(x) for x in items],
        pagination=PaginationRead(**paginator.as_dict()),
        count=count,
    )
