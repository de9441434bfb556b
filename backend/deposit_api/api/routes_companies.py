from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from deposit_api.api.envelope import success_envelope
from deposit_api.db import get_db
from deposit_api.errors import StorageError
from deposit_api.repositories.company_repo import CompanyRepository
from deposit_api.schemas.company_schema import CompanyOut
from deposit_api.utils.latency import simulate_network_delay
from deposit_api.utils.log import get_logger

router = APIRouter(tags=["companies"])
log = get_logger("routes_companies")


@router.get("", summary="List companies")
def list_companies(db: Session = Depends(get_db)):
    simulate_network_delay(150, 500)
    try:
        companies = CompanyRepository(db).list_all()
    except StorageError as e:
        log.error("Error fetching companies: %s", e)
        raise StorageError("Failed to fetch companies") from e

    data = [CompanyOut.model_validate(c).model_dump(by_alias=True) for c in companies]
    return success_envelope(data, total=len(data))
