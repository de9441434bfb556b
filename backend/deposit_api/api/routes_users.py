from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from deposit_api.api.envelope import success_envelope
from deposit_api.db import get_db
from deposit_api.errors import StorageError
from deposit_api.repositories.user_repo import UserRepository
from deposit_api.schemas.user_schema import UserOut
from deposit_api.utils.latency import simulate_network_delay
from deposit_api.utils.log import get_logger

router = APIRouter(tags=["users"])
log = get_logger("routes_users")


@router.get("", summary="List users")
def list_users(db: Session = Depends(get_db)):
    simulate_network_delay(180, 550)
    try:
        users = UserRepository(db).list_all()
    except StorageError as e:
        log.error("Error fetching users: %s", e)
        raise StorageError("Failed to fetch users") from e

    data = [UserOut.model_validate(u).model_dump(by_alias=True) for u in users]
    return success_envelope(data, total=len(data))
