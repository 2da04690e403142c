import logging
import smtplib
import ssl
from dataclasses import dataclass, field
from email.mime.application import MIMEApplication
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from userhub_config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attachment:
    filename: str
    content: bytes


@dataclass(frozen=True)
class EmailMessage:
    to: list[str]
    subject: str
    body: str
    is_html: bool = False
    cc: list[str] = field(default_factory=list)
    bcc: list[str] = field(default_factory=list)
    attachments: list[Attachment] = field(default_factory=list)

    @property
    def recipients(self) -> list[str]:
        return [*self.to, *self.cc, *self.bcc]


class Mailer:
    """SMTP mailer. Disabled unless ``SMTP_ENABLED`` is set."""

    def __init__(self, settings: Settings):
        self._settings = settings

    def _create_message(self, email: EmailMessage) -> MIMEMultipart:
        msg = MIMEMultipart("mixed")
        msg["Subject"] = email.subject
        msg["From"] = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        msg["To"] = ", ".join(email.to)
        if email.cc:
            msg["Cc"] = ", ".join(email.cc)
        # Bcc recipients only go into the envelope

        msg.attach(MIMEText(email.body, "html" if email.is_html else "plain"))

        for attachment in email.attachments:
            part = MIMEApplication(attachment.content, Name=attachment.filename)
            part["Content-Disposition"] = (
                f'attachment; filename="{attachment.filename}"'
            )
            msg.attach(part)

        return msg

    def send(self, email: EmailMessage) -> None:
        if not email.to:
            msg = "Email must have at least one recipient"
            raise ValueError(msg)

        if not self._settings.smtp_enabled:
            logger.warning("SMTP disabled, email not sent to %s", email.to)
            return

        if not self._settings.smtp_host:
            logger.error("SMTP host not configured")
            return

        message = self._create_message(email)
        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )

        try:
            if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
                # Implicit TLS (port 465)
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    context=context,
                ) as server:
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message, to_addrs=email.recipients)
            else:
                # STARTTLS (port 587) or plain
                with smtplib.SMTP(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                ) as server:
                    if self._settings.smtp_starttls:
                        context = ssl.create_default_context()
                        server.starttls(context=context)
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message, to_addrs=email.recipients)

            logger.info("Email sent to %s", email.to)

        except Exception as e:
            logger.error("Failed to send email to %s: %s", email.to, e)
            raise

    def send_simple(self, to: str, subject: str, body: str) -> None:
        self.send(EmailMessage(to=[to], subject=subject, body=body))

    def send_html(self, to: str, subject: str, html: str) -> None:
        self.send(EmailMessage(to=[to], subject=subject, body=html, is_html=True))
