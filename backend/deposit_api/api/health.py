from fastapi import APIRouter

from deposit_api.utils.clock import utc_timestamp
from deposit_api.utils.latency import simulate_network_delay

router = APIRouter()


@router.get("/health", tags=["health"])
def health():
    simulate_network_delay(50, 200)
    return {
        "success": True,
        "message": "Server is running",
        "timestamp": utc_timestamp(),
    }
