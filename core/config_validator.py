# core/config_validator.py

from typing import List
from core.config import settings
from core.logging_config import logger
from models.entities import ENTITIES


REJECTION_POLICY_KEYS = ("EVENT_REJECTION_POLICY", "OPPORTUNITY_REJECTION_POLICY")

# Kinds with a date column the expiry sweep can compare
SWEEPABLE_KINDS = tuple(kind.value for kind, spec in ENTITIES.items() if spec.expiry_field)


def validate_required_config() -> List[str]:
    """
    Validate that all required environment variables are set.
    Returns list of missing or invalid required variables.
    """
    missing = []

    if not settings.SUPABASE_URL:
        missing.append("SUPABASE_URL")
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        missing.append("SUPABASE_SERVICE_ROLE_KEY")

    for key in REJECTION_POLICY_KEYS:
        value = getattr(settings, key)
        if value not in ("retain", "delete"):
            missing.append(f"{key} (got {value!r}, expected 'retain' or 'delete')")

    invalid_kinds = [k for k in settings.EXPIRY_SWEEP_KINDS if k not in SWEEPABLE_KINDS]
    if invalid_kinds:
        missing.append(
            f"EXPIRY_SWEEP_KINDS (unknown or undated kinds {invalid_kinds}, "
            f"expected any of {list(SWEEPABLE_KINDS)})"
        )

    return missing


def validate_optional_config() -> List[str]:
    """
    Validate optional but recommended configuration.
    Returns list of missing optional variables (warnings only).
    """
    warnings = []

    if not all([settings.SMTP_HOST, settings.SMTP_PORT, settings.SMTP_USER, settings.SMTP_PASS]):
        warnings.append("SMTP_* (feedback responses will not be emailed)")

    if not settings.SYNC_WEBHOOK_URL:
        warnings.append("SYNC_WEBHOOK_URL (sweep summaries will not be posted)")

    return warnings


def validate_config_on_startup():
    """
    Validate configuration on application startup.
    Raises RuntimeError if critical config is missing.
    Logs warnings for optional config.
    """
    missing_required = validate_required_config()
    missing_optional = validate_optional_config()

    if missing_required:
        error_msg = f"Missing or invalid required environment variables: {', '.join(missing_required)}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)

    for warning in missing_optional:
        logger.warning(f"Optional configuration missing: {warning}")

    logger.info("Configuration validation passed")
