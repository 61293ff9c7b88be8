from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CustomerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)


class CustomerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime


class PaginationRead(BaseModel):
    offset: int
    limit: int


class CustomerListRead(BaseModel):
    items: list[CustomerRead]
    pagination: PaginationRead
    count: int | None = None
