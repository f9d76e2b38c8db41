# core/notifications.py
import requests
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from typing import Optional
from core.config import settings
from core.logging_config import logger


# -----------------------------------------------------
# 📨 Webhook (sweep summaries → Discord / Slack)
# -----------------------------------------------------
def send_webhook_message(message: str) -> bool:
    """
    Post a plain-text message to SYNC_WEBHOOK_URL.
    Delivery problems are logged, never raised: a summary is not worth
    failing a sweep over.
    """
    webhook_url = settings.SYNC_WEBHOOK_URL
    if not webhook_url:
        logger.debug("Webhook URL not configured — skipping.")
        return False

    try:
        response = requests.post(webhook_url, json={"content": message}, timeout=10)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"Webhook failed: {e}")
        return False

    logger.info(f"Webhook sent (status {response.status_code})")
    return True


# -----------------------------------------------------
# 📧 Email (feedback responses)
# -----------------------------------------------------
def smtp_configured() -> bool:
    return all([settings.SMTP_HOST, settings.SMTP_PORT, settings.SMTP_USER, settings.SMTP_PASS])


def build_message(subject: str, body: str, to: str, html_body: Optional[str] = None) -> MIMEMultipart:
    msg = MIMEMultipart("alternative")
    msg["From"] = settings.SMTP_USER
    msg["To"] = to
    msg["Subject"] = subject
    if settings.SMTP_TO:
        msg["Reply-To"] = settings.SMTP_TO

    msg.attach(MIMEText(body, "plain"))
    if html_body:
        msg.attach(MIMEText(html_body, "html"))
    return msg


def send_email(subject: str, body: str, to: str, html_body: Optional[str] = None) -> bool:
    """
    Send one email over SMTP (SSL).

    Returns True when the SMTP server accepted it, False when SMTP is not
    configured. SMTP errors raise.
    """
    if not to:
        logger.warning("No recipient specified — skipping email.")
        return False

    if not smtp_configured():
        logger.warning("Email credentials missing — skipping email.")
        return False

    msg = build_message(subject, body, to, html_body)

    try:
        with smtplib.SMTP_SSL(settings.SMTP_HOST, settings.SMTP_PORT) as server:
            server.login(settings.SMTP_USER, settings.SMTP_PASS)
            server.send_message(msg)
    except smtplib.SMTPException as e:
        logger.error(f"Email to {to} failed: {e}")
        raise

    logger.info(f"Email sent to {to}")
    return True
