from sqlalchemy import Column, ForeignKey, Integer, String
from deposit_api.db import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    company_id = Column("companyId", Integer, ForeignKey("companies.id"), nullable=False)
    first_name = Column("firstName", String, nullable=False)
    last_name = Column("lastName", String, nullable=False)
    email = Column(String, nullable=False)
    created_at = Column("createdAt", String, nullable=False)

    def __repr__(self):
        return f"<User id={self.id} email={self.email}>"
