"""Unit tests for EmailVerificationNotifier."""

from unittest.mock import MagicMock, patch

from makemeacube.infrastructure.email import EmailVerificationNotifier
from makemeacube_config.settings import Settings
from tests.shared.fixtures.factories import TestUserFactory

SMTP_PATH = "makemeacube.infrastructure.email.verification_email_notifier.smtplib"


def _settings(**overrides) -> Settings:
    values = {
        "smtp_enabled": True,
        "smtp_host": "smtp.example.com",
        "smtp_port": 587,
        "smtp_user": "mailer",
        "smtp_password": "secret",
        "smtp_from_email": "noreply@example.com",
        "frontend_base_url": "https://makemeacube.example/",
        "email_verification_path": "verify-email",
    }
    values.update(overrides)
    return Settings(**values)


class TestEmailVerificationNotifier:
    def test_verification_link(self):
        notifier = EmailVerificationNotifier(_settings())

        link = notifier.verification_link(TestUserFactory.basic())

        assert link == (
            f"https://makemeacube.example/verify-email/{TestUserFactory.BOB_ID}"
        )

    def test_disabled_smtp_sends_nothing(self):
        notifier = EmailVerificationNotifier(_settings(smtp_enabled=False))

        with patch(SMTP_PATH) as smtplib:
            notifier.send_verification(TestUserFactory.basic())

        smtplib.SMTP.assert_not_called()
        smtplib.SMTP_SSL.assert_not_called()

    def test_sends_over_starttls(self):
        notifier = EmailVerificationNotifier(_settings())
        server = MagicMock()

        with patch(SMTP_PATH) as smtplib:
            smtplib.SMTP.return_value.__enter__.return_value = server
            notifier.send_verification(TestUserFactory.basic())

        smtplib.SMTP.assert_called_once_with("smtp.example.com", 587)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("mailer", "secret")
        message = server.send_message.call_args.args[0]
        assert message["To"] == TestUserFactory.BOB_EMAIL
        assert "verify-email" in message.as_string()

    def test_implicit_tls(self):
        notifier = EmailVerificationNotifier(
            _settings(smtp_port=465, smtp_starttls=False),
        )
        server = MagicMock()

        with patch(SMTP_PATH) as smtplib:
            smtplib.SMTP_SSL.return_value.__enter__.return_value = server
            notifier.send_verification(TestUserFactory.basic())

        smtplib.SMTP.assert_not_called()
        server.send_message.assert_called_once()
