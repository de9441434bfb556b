from sqlalchemy import Column, Integer, String
from deposit_api.db import Base

class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    registered_at = Column("registeredAt", String, nullable=False)

    def __repr__(self):
        return f"<Company id={self.id} name={self.name}>"
