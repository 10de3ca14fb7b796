"""Tests for the Resend email client."""

from unittest.mock import MagicMock, patch

import pytest

from src.checkinn.core.notifications import email as email_module
from src.checkinn.core.notifications import (
    send_partner_rejected_email,
    send_welcome_email,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def resend_settings() -> MagicMock:
    settings = MagicMock()
    settings.resend_api_key = "re_test_key"
    settings.email_from = "CheckInn <noreply@checkinn.com>"
    settings.email_send_timeout_seconds = 5
    settings.app_name = "CheckInn"
    settings.app_url = "http://localhost:3000"
    return settings


def test_skipped_without_api_key(resend_settings):
    """Without RESEND_API_KEY the email is logged and treated as sent."""
    resend_settings.resend_api_key = None
    with (
        patch.object(email_module, "get_settings", return_value=resend_settings),
        patch.object(email_module.resend.Emails, "send") as send,
    ):
        assert send_welcome_email("guest@example.com", "Guest") is True

    send.assert_not_called()


def test_sends_through_resend(resend_settings):
    with (
        patch.object(email_module, "get_settings", return_value=resend_settings),
        patch.object(email_module.resend.Emails, "send") as send,
    ):
        assert send_partner_rejected_email("a@example.com", "An", "Blurry <scan>") is True

    params = send.call_args.args[0]
    assert params["to"] == ["a@example.com"]
    assert "Blurry &lt;scan&gt;" in params["html"]


def test_provider_failure_returns_false(resend_settings):
    with (
        patch.object(email_module, "get_settings", return_value=resend_settings),
        patch.object(email_module.resend.Emails, "send", side_effect=RuntimeError("down")),
    ):
        assert send_welcome_email("guest@example.com", "Guest") is False
