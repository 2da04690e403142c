from userhub.infrastructure.email.mailer import Attachment, EmailMessage, Mailer

__all__ = [
    "Attachment",
    "EmailMessage",
    "Mailer",
]
