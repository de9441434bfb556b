from typing import List, Optional

from deposit_api.errors import StorageError
from deposit_api.models.company import Company
from deposit_api.utils.log import get_logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

log = get_logger("company_repo")


class CompanyRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Company]:
        """Newest registration first."""
        try:
            stmt = select(Company).order_by(Company.registered_at.desc())
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            log.exception("list_all() failed")
            raise StorageError() from e

    def get_by_id(self, company_id: int) -> Optional[Company]:
        try:
            return self.db.get(Company, company_id)
        except SQLAlchemyError as e:
            log.exception("get_by_id(%s) failed", company_id)
            raise StorageError() from e

    def create(self, id: int, name: str, registered_at: str) -> Company:
        c = Company(id=id, name=name, registered_at=registered_at)
        self.db.add(c)
        self.db.flush()
        return c
