from deposit_api.schemas.product_schema import CamelModel


class UserOut(CamelModel):
    id: int
    company_id: int
    first_name: str
    last_name: str
    email: str
    created_at: str
