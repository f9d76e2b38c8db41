# core/rate_limiter.py

import time
from collections import deque
from typing import Deque, Dict, Optional

from fastapi import Request

from core.errors import RateLimited


# Sliding-window attempt log, per process. Identifiers with no attempt
# inside the window are dropped.
_attempts: Dict[str, Deque[float]] = {}


def check_rate_limit(identifier: str, max_requests: int, window_seconds: int) -> int:
    """
    Record one attempt for `identifier`.
    Returns the attempts left in the window; raises RateLimited once
    `max_requests` attempts already fall inside it.
    """
    now = time.time()
    cutoff = now - window_seconds

    for key in [k for k, w in _attempts.items() if w[-1] <= cutoff]:
        del _attempts[key]

    window = _attempts.get(identifier)
    if window is None:
        window = _attempts[identifier] = deque()

    while window and window[0] <= cutoff:
        window.popleft()

    if len(window) >= max_requests:
        retry_in = int(window[0] + window_seconds - now) + 1
        raise RateLimited(
            f"Too many attempts. Try again in {retry_in} seconds."
        )

    window.append(now)
    return max_requests - len(window)


def reset_rate_limits():
    """Forget every recorded attempt."""
    _attempts.clear()


def login_identifier(request: Request, email: Optional[str] = None) -> str:
    """Throttle key: the login email when given, else the caller's IP."""
    if email:
        return f"login:{email.strip().lower()}"

    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return f"ip:{forwarded_for.split(',')[0].strip()}"

    return f"ip:{request.client.host if request.client else 'unknown'}"
