# core/errors.py

from typing import Optional


# -----------------------------------------------------
# Error taxonomy
# -----------------------------------------------------
class AdminError(Exception):
    """
    Base class for every failure surfaced by the admin API.
    main.py turns these into JSON responses using status_code.
    """

    status_code = 500
    kind = "error"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(AdminError):
    """Referenced row is absent."""

    status_code = 404
    kind = "not_found"


class ValidationFailure(AdminError):
    """Required field missing or malformed before the store is touched."""

    status_code = 422
    kind = "validation_failure"


class InvalidTransition(AdminError):
    """Status change not allowed from the row's current state."""

    status_code = 409
    kind = "invalid_transition"


class StoreFailure(AdminError):
    """Any query / insert / update / delete error reported by the store."""

    status_code = 500
    kind = "store_failure"


class RateLimited(AdminError):
    """The auth collaborator (or the local login limiter) is throttling us."""

    status_code = 429
    kind = "rate_limited"


# -----------------------------------------------------
# Supabase error helpers
# -----------------------------------------------------
def extract_supabase_error(error: Exception) -> str:
    """
    Safely extract readable details from Supabase Python client errors.
    Handles:
      • PostgREST errors
      • GoTrue (Auth) errors
      • Generic Python exceptions
    """

    # Case 1: Supabase Auth / PostgREST errors carry .message
    message = getattr(error, "message", None)
    if message:
        return str(message)

    # Case 2: errors with args (common)
    if getattr(error, "args", None):
        return str(error.args[0])

    # Case 3: Plain string fallback
    return str(error) or "Unknown Supabase error"


def error_status(error: Exception) -> Optional[int]:
    """HTTP-ish status attached to a Supabase error, if any."""
    for attr in ("status", "code", "status_code"):
        value = getattr(error, attr, None)
        if value is None:
            continue
        try:
            return int(value)
        except (TypeError, ValueError):
            continue
    return None


def store_failure(error: Exception, operation: str) -> StoreFailure:
    """
    Build a StoreFailure from a client exception.
    Returns (doesn't raise) so the caller can `raise ... from error`.
    """
    from core.logging_config import logger

    detail = extract_supabase_error(error)
    logger.error(f"{operation}: {detail}")

    # Provide user-friendly messages for common errors
    detail_lower = detail.lower()
    if "duplicate" in detail_lower or "unique" in detail_lower:
        return StoreFailure(f"{operation}: Record already exists", status_code=400)
    if "foreign key" in detail_lower:
        return StoreFailure(f"{operation}: Invalid reference", status_code=400)
    return StoreFailure(f"{operation}: {detail}")
