from fastapi import APIRouter, HTTPException, Depends, Request
from core.config import settings
from core.errors import RateLimited, error_status, store_failure
from core.supabase_client import get_supabase_client
from core.rate_limiter import check_rate_limit, login_identifier
from dependencies.auth import get_current_admin, is_admin_user, ADMIN_USERS_TABLE
from core.logging_config import logger
from models.auth import CurrentAdmin, LoginRequest, SignupRequest, TokenResponse


router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)

RATE_LIMIT_MESSAGE = "Request rate limit reached. Please wait a few minutes before trying again."


# ============================================================
# LOGIN (SUPABASE AUTH)
# ============================================================
@router.post("/login", response_model=TokenResponse, summary="Authenticate admin")
def login(payload: LoginRequest, request: Request):

    email = payload.email.strip().lower()

    # Local throttle per email, before we hit the auth provider
    check_rate_limit(
        login_identifier(request, email),
        max_requests=settings.LOGIN_MAX_ATTEMPTS,
        window_seconds=settings.LOGIN_WINDOW_SECONDS,
    )

    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    try:
        response = client.auth.sign_in_with_password(
            {"email": email, "password": payload.password}
        )
    except Exception as e:
        if error_status(e) == 429:
            logger.warning(f"Auth provider throttled login for {email}")
            raise RateLimited(RATE_LIMIT_MESSAGE)
        # Log the error for debugging but don't expose details to user
        logger.warning(f"Login attempt failed for {email}: {type(e).__name__}")
        raise HTTPException(status_code=401, detail="Invalid email or password")

    if not response.session or not response.session.access_token:
        raise HTTPException(401, "Invalid email or password")

    # Only admin_users may use the back-office
    try:
        allowed = is_admin_user(client, response.user.id)
    except Exception as e:
        if error_status(e) == 429:
            raise RateLimited(RATE_LIMIT_MESSAGE)
        logger.error(f"Admin lookup failed for {email}: {e}")
        raise HTTPException(500, "Admin lookup failed")

    if not allowed:
        logger.warning(f"Non-admin login rejected: {email}")
        raise HTTPException(403, "You don't have admin privileges.")

    logger.info(f"Admin login: {email}")
    return TokenResponse(
        access_token=response.session.access_token,
        refresh_token=getattr(response.session, "refresh_token", None),
    )


# ============================================================
# SIGNUP: existing admin creates another admin account
# ============================================================
@router.post("/signup", response_model=CurrentAdmin, summary="Create an admin account")
def signup(
    payload: SignupRequest,
    current_admin: CurrentAdmin = Depends(get_current_admin),
):
    email = payload.email.strip().lower()

    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    try:
        result = client.auth.admin.create_user(
            {
                "email": email,
                "password": payload.password,
                "email_confirm": True,
            }
        )
    except Exception as e:
        if error_status(e) == 429:
            raise RateLimited(RATE_LIMIT_MESSAGE)
        logger.warning(f"Admin signup failed for {email}: {e}")
        raise HTTPException(400, f"Could not create account: {e}")

    user = result.user

    try:
        client.table(ADMIN_USERS_TABLE).insert(
            {"id": user.id, "email": user.email},
            returning="representation",
        ).execute()
    except Exception as e:
        # Roll back the auth account created above
        try:
            client.auth.admin.delete_user(user.id)
        except Exception as cleanup_error:
            logger.error(
                f"Auth user {user.id} ({email}) left without an admin_users row: {cleanup_error}"
            )
        raise store_failure(e, f"Failed to register {email} as admin") from e

    logger.info(f"{current_admin.email} created admin account {email}")
    return CurrentAdmin(id=str(user.id), email=user.email)


# ============================================================
# LOGOUT
# ============================================================
@router.post("/logout", summary="Revoke the current session")
def logout(current_admin: CurrentAdmin = Depends(get_current_admin)):
    client = get_supabase_client()

    try:
        client.auth.admin.sign_out(current_admin.access_token)
    except Exception as e:
        logger.warning(f"Sign-out failed for {current_admin.email}: {e}")
        raise HTTPException(500, "Sign-out failed")

    logger.info(f"Admin logout: {current_admin.email}")
    return {"status": "signed_out"}


# ============================================================
# CURRENT ADMIN
# ============================================================
@router.get("/me", response_model=CurrentAdmin, response_model_exclude={"access_token"}, summary="Current admin")
def read_me(current_admin: CurrentAdmin = Depends(get_current_admin)):
    return current_admin
