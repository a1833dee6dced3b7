import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from makemeacube.application.ports.notification import VerificationNotifier
from makemeacube.domain.user import User
from makemeacube_config.settings import Settings

logger = logging.getLogger(__name__)

VERIFICATION_SUBJECT = "Confirm your email - MakeMeACube"

VERIFICATION_TEXT = """Hello {pseudo},

Welcome to MakeMeACube! Please confirm your email address by opening
the link below:
{verification_link}

If you did not create an account, you can ignore this email.

-- MakeMeACube
"""

VERIFICATION_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; padding: 40px;">
        <h2 style="margin-top: 0;">Welcome, {pseudo}</h2>
        <p>Please confirm your email address to finish your registration.</p>
        <p style="margin: 30px 0; text-align: center;">
            <a href="{verification_link}" style="display: inline-block; padding: 14px 28px; background-color: #ea580c; color: #ffffff !important; text-decoration: none; border-radius: 6px; font-weight: 600;">Confirm email</a>
        </p>
        <p style="color: #6b7280; font-size: 14px;">Or copy this link into your browser:</p>
        <p style="word-break: break-all; font-size: 14px;">{verification_link}</p>
    </div>
</body>
</html>
"""


class EmailVerificationNotifier(VerificationNotifier):
    """Send the verification link of a new user over SMTP."""

    def __init__(self, settings: Settings):
        self._settings = settings

    def verification_link(self, user: User) -> str:
        return f"{self._settings.email_verification_url}/{user.id}"

    def send_verification(self, user: User) -> None:
        if not self._settings.smtp_enabled:
            logger.warning(
                "SMTP disabled, verification email not sent to %s",
                user.email,
            )
            return

        link = self.verification_link(user)
        message = self._create_message(
            to_email=user.email,
            subject=VERIFICATION_SUBJECT,
            text_body=VERIFICATION_TEXT.format(
                pseudo=user.pseudo,
                verification_link=link,
            ),
            html_body=VERIFICATION_HTML.format(
                pseudo=user.pseudo,
                verification_link=link,
            ),
        )
        self._send(user.email, message)

    def _create_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = (
            f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        )
        msg["To"] = to_email
        msg.attach(MIMEText(text_body, "plain"))
        msg.attach(MIMEText(html_body, "html"))
        return msg

    def _send(self, to_email: str, message: MIMEMultipart) -> None:
        if not self._settings.smtp_host:
            logger.error("SMTP host not configured")
            return

        password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )

        if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
            # Implicit TLS (port 465)
            with smtplib.SMTP_SSL(
                self._settings.smtp_host,
                self._settings.smtp_port,
                context=ssl.create_default_context(),
            ) as server:
                self._login(server, password)
                server.send_message(message)
        else:
            with smtplib.SMTP(
                self._settings.smtp_host,
                self._settings.smtp_port,
            ) as server:
                if self._settings.smtp_starttls:
                    server.starttls(context=ssl.create_default_context())
                self._login(server, password)
                server.send_message(message)

        logger.info("Verification email sent to %s", to_email)

    def _login(self, server: smtplib.SMTP, password: str) -> None:
        if self._settings.smtp_user:
            server.login(self._settings.smtp_user, password)
