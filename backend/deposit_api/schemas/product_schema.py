# backend/deposit_api/schemas/product_schema.py
from typing import Literal, Optional
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

SortField = Literal["name", "registeredAt"]
SortOrder = Literal["asc", "desc"]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )


class ProductOut(CamelModel):
    id: int
    company_id: int
    registered_by_id: int
    name: str
    packaging: str
    deposit: int
    volume: int
    registered_at: str
    active: bool


class ProductListParams(BaseModel):
    """Validated query-string parameters of the product listing."""

    model_config = ConfigDict(frozen=True)

    page: int = 1
    limit: int = 18
    active: Optional[bool] = None
    sort: SortField = "registeredAt"
    # None means "leave the ordering to storage"
    order: Optional[SortOrder] = "desc"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PaginationOut(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_previous_page: bool
