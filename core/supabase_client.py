# core/supabase_client.py

from supabase import create_client, Client
from core.config import settings
from core.logging_config import logger


# Tables owned by the content store
CONTENT_TABLES = [
    "events",
    "opportunities",
    "jobs",
    "resources",
    "submissions",
    "feedback",
    "newsletter_signups",
    "admin_users",
]

# Columns added by migrations/; selecting them flags an unmigrated table
PROBE_COLUMNS = {
    "events": "id, source_submission_id",
    "opportunities": "id, source_submission_id",
}


# ============================================================
# Supabase Client Factory (ALWAYS service role)
# ============================================================

def get_supabase_client() -> Client:
    """
    Creates a Supabase client using the SERVICE ROLE KEY.
    REQUIRED for:
        - full read/write on the content tables
        - auth.get_user token validation
        - storage uploads to the resource bucket
    """
    try:
        supabase_url = settings.SUPABASE_URL
        supabase_key = settings.SUPABASE_SERVICE_ROLE_KEY  # MUST be service-role

        if not supabase_url or not supabase_key:
            logger.error("Missing Supabase credentials")
            logger.error(f"   URL: {supabase_url}")
            logger.error(f"   SERVICE ROLE KEY: {'SET' if supabase_key else 'MISSING'}")
            return None

        return create_client(supabase_url, supabase_key)

    except Exception as e:
        logger.error(f"Supabase Init Error: {e}", exc_info=True)
        return None


# ============================================================
# Ping Supabase for health checks
# ============================================================

def ping_supabase() -> dict:
    """
    Simple connectivity check against every content table.
    """
    try:
        client = get_supabase_client()
        if client is None:
            return {"service": "Supabase", "status": "not_configured"}

        results = {}

        for t in CONTENT_TABLES:
            try:
                res = client.table(t).select(PROBE_COLUMNS.get(t, "id")).limit(1).execute()
                results[t] = {
                    "status": "ok",
                    "rows_found": len(res.data or [])
                }
            except Exception as err:
                results[t] = {"status": "error", "detail": str(err)}

        overall = "ok" if all(r["status"] == "ok" for r in results.values()) else "degraded"

        return {
            "service": "Supabase",
            "status": overall,
            "tables": results,
        }

    except Exception as e:
        logger.error(f"Supabase Ping Error: {e}", exc_info=True)
        return {"service": "Supabase", "status": "error", "detail": str(e)}
