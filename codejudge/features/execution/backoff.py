from __future__ import annotations

from typing import List

INITIAL_DELAY_MS = 1000
MAX_DELAY_MS = 8000
MAX_ATTEMPTS = 10


def backoff_delay_ms(attempt: int) -> int:
    """Delay after the ``attempt``-th (0-based) non-terminal poll: 1s doubling, capped at 8s."""
    if attempt < 0:
        raise ValueError("attempt must be >= 0")
    # 2**3 already reaches the cap; avoid huge ints for large attempt numbers
    return min(INITIAL_DELAY_MS * (2 ** min(attempt, 16)), MAX_DELAY_MS)


def backoff_schedule(max_attempts: int = MAX_ATTEMPTS) -> List[int]:
    return [backoff_delay_ms(i) for i in range(max_attempts)]
