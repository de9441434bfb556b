from typing import List, Optional

from deposit_api.errors import StorageError
from deposit_api.models.user import User
from deposit_api.utils.log import get_logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

log = get_logger("user_repo")


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[User]:
        """Newest account first."""
        try:
            stmt = select(User).order_by(User.created_at.desc())
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            log.exception("list_all() failed")
            raise StorageError() from e

    def get_by_id(self, user_id: int) -> Optional[User]:
        try:
            return self.db.get(User, user_id)
        except SQLAlchemyError as e:
            log.exception("get_by_id(%s) failed", user_id)
            raise StorageError() from e

    def create(
        self,
        id: int,
        company_id: int,
        first_name: str,
        last_name: str,
        email: str,
        created_at: str,
    ) -> User:
        u = User(
            id=id,
            company_id=company_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            created_at=created_at,
        )
        self.db.add(u)
        self.db.flush()
        return u
