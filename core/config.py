from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "Glow Up Diaries Admin API"
    ENV: str = "development"

    # -------------------------------------------------
    # Admin front-end domains
    # -------------------------------------------------
    ADMIN_FRONTEND_DOMAIN: Optional[str] = Field(
        None,
        env="ADMIN_FRONTEND_DOMAIN"
    )

    ADMIN_FRONTEND_DOMAINS: List[str] = [
        "https://admin.glowupdiaries.com",
        "http://localhost:3000",
    ]

    # -------------------------------------------------
    # CORS (auto-built below)
    # -------------------------------------------------
    BACKEND_CORS_ORIGINS: List[str] = []

    # -------------------------------------------------
    # Supabase (store, auth, object storage)
    # -------------------------------------------------
    SUPABASE_URL: Optional[str] = Field(None, env="SUPABASE_URL")
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = Field(None, env="SUPABASE_SERVICE_ROLE_KEY")

    RESOURCE_BUCKET: str = Field("resource-bucket", env="RESOURCE_BUCKET")

    # -------------------------------------------------
    # SMTP Email (feedback responses)
    # -------------------------------------------------
    SMTP_HOST: Optional[str] = Field(None, env="SMTP_HOST")
    SMTP_PORT: Optional[int] = Field(None, env="SMTP_PORT")
    SMTP_USER: Optional[str] = Field(None, env="SMTP_USER")
    SMTP_PASS: Optional[str] = Field(None, env="SMTP_PASS")
    SMTP_TO: Optional[str] = Field(None, env="SMTP_TO")

    # -------------------------------------------------
    # Webhook (sweep summaries)
    # -------------------------------------------------
    SYNC_WEBHOOK_URL: Optional[str] = Field(None, env="SYNC_WEBHOOK_URL")

    # -------------------------------------------------
    # Expiry sweep
    # -------------------------------------------------
    EXPIRY_SWEEP_ENABLED: bool = Field(True, env="EXPIRY_SWEEP_ENABLED")
    EXPIRY_SWEEP_INTERVAL_MINUTES: int = Field(
        60,
        env="EXPIRY_SWEEP_INTERVAL_MINUTES",
        description="Minutes between expiry sweeps (default: hourly)",
    )
    EXPIRY_SWEEP_KINDS: List[str] = Field(
        ["event", "opportunity"],
        env="EXPIRY_SWEEP_KINDS",
        description="Published entity kinds pruned once their date passes",
    )

    # -------------------------------------------------
    # Submission rejection policy ("retain" or "delete")
    # -------------------------------------------------
    EVENT_REJECTION_POLICY: str = Field("retain", env="EVENT_REJECTION_POLICY")
    OPPORTUNITY_REJECTION_POLICY: str = Field("delete", env="OPPORTUNITY_REJECTION_POLICY")

    # -------------------------------------------------
    # Login throttling
    # -------------------------------------------------
    LOGIN_MAX_ATTEMPTS: int = Field(5, env="LOGIN_MAX_ATTEMPTS")
    LOGIN_WINDOW_SECONDS: int = Field(300, env="LOGIN_WINDOW_SECONDS")

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    class Config:
        case_sensitive = True


# Instantiate settings
settings = Settings()

# -------------------------------------------------
# Build CORS list dynamically after loading settings
# -------------------------------------------------
cors_origins = []

# 1) add custom admin domain
if settings.ADMIN_FRONTEND_DOMAIN:
    domain = settings.ADMIN_FRONTEND_DOMAIN
    if not domain.startswith("http"):
        domain = f"https://{domain}"
    cors_origins.append(domain.rstrip("/"))

# 2) add known admin front-end domains
cors_origins.extend([d.rstrip("/") for d in settings.ADMIN_FRONTEND_DOMAINS])

# 3) remove duplicates
settings.BACKEND_CORS_ORIGINS = sorted(list(set(cors_origins)))
