from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from supabase import Client

from core.errors import RateLimited, error_status
from core.logging_config import logger
from core.supabase_client import get_supabase_client
from models.auth import CurrentAdmin


bearer_scheme = HTTPBearer()

ADMIN_USERS_TABLE = "admin_users"


# ============================================================
# Admin membership lookup
# ============================================================
def is_admin_user(client: Client, user_id: str) -> bool:
    result = (
        client.table(ADMIN_USERS_TABLE)
        .select("id")
        .eq("id", user_id)
        .limit(1)
        .execute()
    )
    return bool(result.data)


# ============================================================
# AUTH DECODING (Supabase: validates JWT + checks admin_users)
# ============================================================
def get_current_admin(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> CurrentAdmin:

    token = credentials.credentials

    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired authentication token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    client: Client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    # ---------------------------------------------------------
    # Validate JWT via Supabase GoTrue
    # ---------------------------------------------------------
    try:
        auth_resp = client.auth.get_user(token)
    except Exception as e:
        if error_status(e) == 429:
            raise RateLimited("Request rate limit reached. Please wait a few minutes before trying again.")
        raise unauthorized

    if not auth_resp or not auth_resp.user or not auth_resp.user.email:
        raise unauthorized

    auth_user = auth_resp.user

    # ---------------------------------------------------------
    # Must be listed in admin_users
    # ---------------------------------------------------------
    try:
        allowed = is_admin_user(client, auth_user.id)
    except Exception as e:
        if error_status(e) == 429:
            raise RateLimited("Request rate limit reached. Please wait a few minutes before trying again.")
        logger.error(f"Admin lookup failed for {auth_user.id}: {e}")
        raise HTTPException(500, "Admin lookup failed")

    if not allowed:
        logger.warning(f"Non-admin {auth_user.email} attempted to use the admin API")
        raise HTTPException(status_code=403, detail="You don't have admin privileges.")

    return CurrentAdmin(
        id=str(auth_user.id),
        email=auth_user.email,
        access_token=token,
    )
