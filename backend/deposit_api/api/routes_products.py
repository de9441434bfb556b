from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from deposit_api.api.envelope import success_envelope
from deposit_api.db import get_db
from deposit_api.errors import StorageError
from deposit_api.schemas.product_schema import ProductOut
from deposit_api.services.product_service import ProductService
from deposit_api.utils.latency import simulate_network_delay
from deposit_api.utils.log import get_logger

router = APIRouter(tags=["products"])
log = get_logger("routes_products")


def _to_dict(p):
    return ProductOut.model_validate(p).model_dump(by_alias=True)


@router.get("", summary="List products")
def list_products(
    page: Optional[str] = Query(None, description="page number, starting at 1"),
    limit: Optional[str] = Query(None, description="items per page"),
    active: Optional[str] = Query(None, description="'true' or '1' for active, anything else for pending"),
    sort: Optional[str] = Query(None, description="name | registeredAt"),
    order: Optional[str] = Query(None, description="asc | desc"),
    db: Session = Depends(get_db),
):
    simulate_network_delay(250, 1000)
    svc = ProductService(db)
    raw = {"page": page, "limit": limit, "active": active, "sort": sort, "order": order}
    try:
        items, pagination = svc.list_products(raw)
    except StorageError as e:
        log.error("Error fetching products: %s", e)
        raise StorageError("Failed to fetch products") from e

    return success_envelope([_to_dict(p) for p in items], pagination=pagination)


@router.post("", status_code=201, summary="Create a product (starts inactive)")
def create_product(payload: dict, db: Session = Depends(get_db)):
    """
    payload: { "name": "Coca Cola", "packaging": "can", "deposit": 25,
               "volume": 330, "companyId": 1, "registeredById": 1 }
    """
    svc = ProductService(db)
    try:
        # validation and reference errors propagate to the app handlers
        p = svc.create_product(payload)
    except StorageError as e:
        log.error("Error creating product: %s", e)
        raise StorageError("Failed to create product") from e

    return success_envelope(_to_dict(p), message="Product created successfully")
