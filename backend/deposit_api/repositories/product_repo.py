from typing import List, Optional, Tuple

from deposit_api.errors import StorageError
from deposit_api.models.product import Product
from deposit_api.services.product_query import ProductQuery
from deposit_api.utils.log import get_logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

log = get_logger("product_repo")


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, product_id: int) -> Optional[Product]:
        try:
            return self.db.get(Product, product_id)
        except SQLAlchemyError as e:
            log.exception("get_by_id(%s) failed", product_id)
            raise StorageError() from e

    def list(self, query: ProductQuery) -> Tuple[List[Product], int]:
        """
        Run the count statement, then the page statement.
        Both carry the same predicates so `total` reflects the filtered set.
        """
        try:
            total = self.db.execute(query.count_statement).scalar_one()
            items = self.db.scalars(query.data_statement).all()
        except SQLAlchemyError as e:
            log.exception("list(%r) failed", query)
            raise StorageError() from e
        return list(items), total

    def create(
        self,
        company_id: int,
        registered_by_id: int,
        name: str,
        packaging: str,
        deposit: int,
        volume: int,
        registered_at: str,
        active: bool = True,
    ) -> Product:
        p = Product(
            company_id=company_id,
            registered_by_id=registered_by_id,
            name=name,
            packaging=packaging,
            deposit=deposit,
            volume=volume,
            registered_at=registered_at,
            active=active,
        )
        try:
            self.db.add(p)
            self.db.flush()
        except SQLAlchemyError as e:
            self.db.rollback()
            log.exception("create(name=%r) failed", name)
            raise StorageError() from e
        return p
