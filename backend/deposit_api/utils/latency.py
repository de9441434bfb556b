import random
import time

from deposit_api.config import settings


def simulate_network_delay(min_ms: int = 100, max_ms: int = 800) -> float:
    """
    Sleep for a random interval in [min_ms, max_ms] when SIMULATE_NETWORK_DELAY
    is on, so the frontend can be exercised against a slow backend.
    Returns the delay applied, in seconds.
    """
    if not settings.SIMULATE_NETWORK_DELAY:
        return 0.0
    delay = random.randint(min_ms, max_ms) / 1000.0
    time.sleep(delay)
    return delay
