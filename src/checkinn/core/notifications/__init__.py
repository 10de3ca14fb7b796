"""Notification utilities - email."""

from src.checkinn.core.notifications.email import (
    send_partner_application_received_email,
    send_partner_approved_email,
    send_partner_rejected_email,
    send_welcome_email,
)

__all__ = [
    "send_partner_application_received_email",
    "send_partner_approved_email",
    "send_partner_rejected_email",
    "send_welcome_email",
]
