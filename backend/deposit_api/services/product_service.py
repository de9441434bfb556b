from typing import Any, List, Mapping, Tuple

from deposit_api.db import SQL_INTEGER_MAX
from deposit_api.errors import StorageError, UnknownReferenceError, ValidationError
from deposit_api.models.product import PACKAGING_TYPES, Product
from deposit_api.repositories.company_repo import CompanyRepository
from deposit_api.repositories.product_repo import ProductRepository
from deposit_api.repositories.user_repo import UserRepository
from deposit_api.schemas.product_schema import PaginationOut
from deposit_api.services.product_query import build_product_query
from deposit_api.utils.clock import utc_timestamp
from deposit_api.utils.latency import simulate_network_delay
from deposit_api.utils.log import get_logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

log = get_logger("product_service")


def _is_number(value: Any) -> bool:
    """A JSON integer that fits an SQLite INTEGER column."""
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return -SQL_INTEGER_MAX - 1 <= value <= SQL_INTEGER_MAX


def validate_product_input(payload: Any) -> List[str]:
    """
    Return every violated constraint of a create-product payload.
    An empty list means the payload is acceptable.
    """
    if not isinstance(payload, Mapping):
        return ["Request body must be a JSON object"]

    errors = []

    name = payload.get("name")
    if not isinstance(name, str) or not name.strip():
        errors.append("Name is required and must be a non-empty string")

    if payload.get("packaging") not in PACKAGING_TYPES:
        errors.append("Packaging must be one of: " + ", ".join(PACKAGING_TYPES))

    deposit = payload.get("deposit")
    if not _is_number(deposit) or deposit <= 0:
        errors.append("Deposit must be a positive number")

    volume = payload.get("volume")
    if not _is_number(volume) or volume <= 0:
        errors.append("Volume must be a positive number")

    if not _is_number(payload.get("companyId")) or not payload.get("companyId"):
        errors.append("Company ID is required and must be a number")

    if not _is_number(payload.get("registeredById")) or not payload.get("registeredById"):
        errors.append("Registered by ID is required and must be a number")

    return errors


class ProductService:
    def __init__(self, db: Session):
        self.db = db
        self.products = ProductRepository(db)
        self.companies = CompanyRepository(db)
        self.users = UserRepository(db)

    def list_products(self, raw_params: Mapping[str, Any]) -> Tuple[List[Product], PaginationOut]:
        # raises ValidationError before any statement runs
        query = build_product_query(raw_params)
        items, total = self.products.list(query)
        return items, query.paginate(total)

    def create_product(self, payload: Any) -> Product:
        """
        Validate, check that the company and user exist, then insert.
        New products always start pending (active=False) with a server timestamp;
        `active` and `registeredAt` in the payload are ignored.
        """
        errors = validate_product_input(payload)
        if errors:
            raise ValidationError.from_errors(errors)

        # lookups and insert are separate statements, not one transaction
        if self.companies.get_by_id(payload["companyId"]) is None:
            raise UnknownReferenceError("Company not found")
        if self.users.get_by_id(payload["registeredById"]) is None:
            raise UnknownReferenceError("User not found")

        simulate_network_delay(300, 1000)

        p = self.products.create(
            company_id=payload["companyId"],
            registered_by_id=payload["registeredById"],
            name=payload["name"].strip(),
            packaging=payload["packaging"],
            deposit=payload["deposit"],
            volume=payload["volume"],
            registered_at=utc_timestamp(),
            active=False,
        )
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            log.exception("commit of new product failed")
            raise StorageError() from e

        created = self.products.get_by_id(p.id)
        log.info("created product id=%s name=%r", created.id, created.name)
        return created
