"""Email client using Resend API."""

import html
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError

import resend

from src.checkinn.core.config import get_settings
from src.checkinn.core.logging import get_logger

logger = get_logger(__name__)

# Thread pool for email sending with timeout support
_email_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="email_sender")

_BODY_STYLE = (
    "font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; "
    "line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;"
)
_BUTTON_STYLE = (
    "background-color: #0f766e; color: white; padding: 12px 24px; "
    "text-decoration: none; border-radius: 6px; display: inline-block; font-weight: 500;"
)
_MUTED_STYLE = "color: #666; font-size: 14px;"
_REASON_STYLE = (
    "background-color: #fef2f2; border-left: 4px solid #dc2626; padding: 12px 16px; margin: 24px 0;"
)


def _send_email(to: str, subject: str, body: str, email_type: str) -> bool:
    """Send one email through Resend.

    Returns:
        True if the email was sent (or skipped because RESEND_API_KEY is unset),
        False if the provider failed or timed out.
    """
    settings = get_settings()

    if not settings.resend_api_key:
        logger.warning("RESEND_API_KEY not set - email not sent", to=to, email_type=email_type)
        return True

    resend.api_key = settings.resend_api_key

    def _send() -> None:
        resend.Emails.send(
            {
                "from": settings.email_from,
                "to": [to],
                "subject": subject,
                "html": body,
            }
        )

    try:
        # Bounded wait so a slow provider cannot hang the worker
        future = _email_executor.submit(_send)
        future.result(timeout=settings.email_send_timeout_seconds)
        logger.info("Email sent", to=to, email_type=email_type)
        return True
    except FuturesTimeoutError:
        logger.error(
            "Email send timed out",
            to=to,
            email_type=email_type,
            timeout=settings.email_send_timeout_seconds,
        )
        return False
    except Exception as e:
        logger.error("Failed to send email", to=to, email_type=email_type, error=str(e))
        return False


def _wrap(heading: str, content: str) -> str:
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="{_BODY_STYLE}">
    <h1 style="color: #0f766e; margin-bottom: 24px;">{heading}</h1>
{content}
</body>
</html>"""


def send_welcome_email(to: str, user_name: str) -> bool:
    """Send the welcome email after customer registration."""
    settings = get_settings()
    app_name = html.escape(settings.app_name)
    content = f"""    <p>Hi {html.escape(user_name)},</p>
    <p>Your {app_name} account is ready. Start exploring hotels and plan your next stay.</p>
    <p style="margin-top: 32px;">Best regards,<br>The {app_name} Team</p>"""
    return _send_email(
        to, f"Welcome to {settings.app_name}!", _wrap(f"Welcome to {app_name}!", content), "welcome"
    )


def send_partner_application_received_email(to: str, user_name: str, business_name: str) -> bool:
    """Confirm that a partner application was received and is awaiting review."""
    settings = get_settings()
    status_url = f"{settings.app_url}/partner/application-status"
    content = f"""    <p>Hi {html.escape(user_name)},</p>
    <p>We received the partner application for
    <strong>{html.escape(business_name)}</strong>. Our team will review it shortly.</p>
    <p style="margin: 32px 0;">
        <a href="{status_url}" style="{_BUTTON_STYLE}">Check application status</a>
    </p>
    <p style="{_MUTED_STYLE}">You can sign in at any time to finish onboarding.</p>"""
    return _send_email(
        to,
        "We received your partner application",
        _wrap("Application received", content),
        "partner_application_received",
    )


def send_partner_approved_email(to: str, user_name: str, business_name: str | None) -> bool:
    """Tell a partner their application was approved."""
    settings = get_settings()
    dashboard_url = f"{settings.app_url}/partner/dashboard"
    business = html.escape(business_name or "your business")
    content = f"""    <p>Hi {html.escape(user_name)},</p>
    <p>Good news! The partner application for <strong>{business}</strong> has been approved.
    You can now list and manage your hotels.</p>
    <p style="margin: 32px 0;">
        <a href="{dashboard_url}" style="{_BUTTON_STYLE}">Open partner dashboard</a>
    </p>"""
    return _send_email(
        to,
        "Your partner application was approved",
        _wrap("You're approved!", content),
        "partner_approved",
    )


def send_partner_rejected_email(to: str, user_name: str, reason: str) -> bool:
    """Tell a partner their application was rejected, including the admin's reason."""
    content = f"""    <p>Hi {html.escape(user_name)},</p>
    <p>After reviewing your partner application we are unable to approve it at this time.</p>
    <div style="{_REASON_STYLE}"><strong>Reason:</strong> {html.escape(reason)}</div>
    <p style="{_MUTED_STYLE}">If you have questions, reply to this email to reach our team.</p>"""
    return _send_email(
        to,
        "Update on your partner application",
        _wrap("Application update", content),
        "partner_rejected",
    )
