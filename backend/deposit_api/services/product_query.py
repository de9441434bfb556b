"""
Product listing query construction.

Turns the raw query string of ``GET /api/products`` into validated
parameters plus a pair of SQLAlchemy statements (page + count) that share
the same predicates, so the reported total always matches the filtered set.
Nothing here touches the database: validation errors are raised before any
statement can be executed.
"""
from typing import Any, Mapping, Optional

from sqlalchemy import func, select

from deposit_api.config import settings
from deposit_api.db import SQL_INTEGER_MAX
from deposit_api.errors import ValidationError
from deposit_api.models.product import Product
from deposit_api.schemas.product_schema import PaginationOut, ProductListParams

VALID_SORT_FIELDS = ("name", "registeredAt")
VALID_ORDERS = ("asc", "desc")

PAGINATION_ERROR = "Page and limit must be positive integers"
SORT_ERROR = "Invalid sort field. Must be one of: " + ", ".join(VALID_SORT_FIELDS)

# whitelist; never interpolate the raw sort value
_SORT_COLUMNS = {
    "name": Product.name,
    "registeredAt": Product.registered_at,
}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _parse_int(value: Any, default: int) -> int:
    if _is_blank(value):
        return default
    if isinstance(value, bool):
        raise ValidationError(PAGINATION_ERROR)
    if isinstance(value, int):
        return value
    text = str(value).strip()
    # plain decimal digits only; no sign, underscores or non-ASCII digits
    if not (text.isascii() and text.isdigit()):
        raise ValidationError(PAGINATION_ERROR)
    return int(text)


def _parse_active(value: Any) -> Optional[bool]:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    return value in ("true", "1")


def parse_list_params(
    raw: Mapping[str, Any], default_limit: Optional[int] = None
) -> ProductListParams:
    """
    Validate and normalize raw listing parameters.

    An invalid ``sort`` is rejected, while an invalid ``order`` only drops the
    ORDER BY clause; existing clients rely on that behaviour.
    """
    if default_limit is None:
        default_limit = settings.DEFAULT_PAGE_LIMIT

    page = _parse_int(raw.get("page"), 1)
    limit = _parse_int(raw.get("limit"), default_limit)
    if page < 1 or limit < 1:
        raise ValidationError(PAGINATION_ERROR)

    sort = raw.get("sort")
    if _is_blank(sort):
        sort = "registeredAt"
    if sort not in VALID_SORT_FIELDS:
        raise ValidationError(SORT_ERROR)

    order = raw.get("order")
    if _is_blank(order):
        order = "desc"
    if order not in VALID_ORDERS:
        order = None

    return ProductListParams(
        page=page,
        limit=limit,
        active=_parse_active(raw.get("active")),
        sort=sort,
        order=order,
    )


def summarize_pagination(total_items: int, page: int, limit: int) -> PaginationOut:
    total_pages = (total_items + limit - 1) // limit
    return PaginationOut(
        current_page=page,
        total_pages=total_pages,
        total_items=total_items,
        items_per_page=limit,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )


class ProductQuery:
    """Data and count statements for one validated listing request."""

    def __init__(self, params: ProductListParams):
        self.params = params

        conditions = []
        if params.active is not None:
            conditions.append(Product.active == params.active)

        count_statement = select(func.count()).select_from(Product)
        data_statement = select(Product)
        if conditions:
            count_statement = count_statement.where(*conditions)
            data_statement = data_statement.where(*conditions)

        if params.order is not None:
            column = _SORT_COLUMNS[params.sort]
            data_statement = data_statement.order_by(
                column.asc() if params.order == "asc" else column.desc()
            )

        self.count_statement = count_statement
        # page and limit are unbounded; past the storage range the page is simply empty
        self.data_statement = data_statement.limit(
            min(params.limit, SQL_INTEGER_MAX)
        ).offset(min(params.offset, SQL_INTEGER_MAX))

    def paginate(self, total_items: int) -> PaginationOut:
        return summarize_pagination(total_items, self.params.page, self.params.limit)

    def __repr__(self):
        return f"<ProductQuery {self.params!r}>"


def build_product_query(
    raw: Mapping[str, Any], default_limit: Optional[int] = None
) -> ProductQuery:
    return ProductQuery(parse_list_params(raw, default_limit=default_limit))
