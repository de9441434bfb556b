from sqlalchemy import Boolean, CheckConstraint, Column, ForeignKey, Integer, String
from deposit_api.db import Base

PACKAGING_TYPES = ("pet", "can", "glass", "tetra", "other")


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint(
            "packaging IN (%s)" % ", ".join(f"'{p}'" for p in PACKAGING_TYPES),
            name="ck_products_packaging",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column("companyId", Integer, ForeignKey("companies.id"), nullable=False)
    registered_by_id = Column("registeredById", Integer, ForeignKey("users.id"), nullable=False)
    name = Column(String, nullable=False)
    packaging = Column(String, nullable=False)
    deposit = Column(Integer, nullable=False)  # cents
    volume = Column(Integer, nullable=False)  # ml
    registered_at = Column("registeredAt", String, nullable=False)
    active = Column(Boolean, default=True, nullable=False)

    def __repr__(self):
        return f"<Product id={self.id} name={self.name}>"
