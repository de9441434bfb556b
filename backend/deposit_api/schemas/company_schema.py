from deposit_api.schemas.product_schema import CamelModel


class CompanyOut(CamelModel):
    id: int
    name: str
    registered_at: str
