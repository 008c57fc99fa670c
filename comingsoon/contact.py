"""Contact form state, validation and submission.

Kept free of Streamlit so the page can bind widgets to it and the tests can
drive it directly. The host decides what "navigate" means; the page passes a
function that queues the mail target for the browser.
"""
import logging
import re
from dataclasses import dataclass, fields
from enum import Enum
from typing import Callable, Optional

from comingsoon.mailto import build_mail_target, compose_body

logger = logging.getLogger(__name__)

OPERATOR_EMAIL = "dan@mafua.com.br"

FIELDS = ("name", "email", "subject", "message")

# Coarse local@domain.tld shape, matched against the whole value
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

MIN_MESSAGE_LENGTH = 10


@dataclass
class FormData:
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""


@dataclass
class FormErrors:
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None

    def invalid_fields(self):
        return [f.name for f in fields(self) if getattr(self, f.name)]

    def is_empty(self) -> bool:
        return not self.invalid_fields()


class SubmitStatus(str, Enum):
    IDLE = "idle"
    SUCCESS = "success"
    ERROR = "error"


def _check_field(field: str):
    if field not in FIELDS:
        raise ValueError(f"Unknown contact form field: {field!r}")


class ContactForm:
    def __init__(self, recipient: str = OPERATOR_EMAIL, navigate: Optional[Callable[[str], None]] = None):
        self.recipient = recipient
        self.navigate = navigate
        self.data = FormData()
        self.errors = FormErrors()
        self.status = SubmitStatus.IDLE

    def change(self, field: str, value: str) -> None:
        """Store a new value for one field and drop that field's error, if any.

        The field is not re-validated here; it stays error-free until the
        next full validate().
        """
        _check_field(field)
        setattr(self.data, field, value)
        if getattr(self.errors, field):
            setattr(self.errors, field, None)

    def validate(self) -> bool:
        data = self.data
        errors = FormErrors()

        if not data.name.strip():
            errors.name = "Name is required"

        if not data.email.strip():
            errors.email = "Email is required"
        elif not EMAIL_PATTERN.fullmatch(data.email):
            errors.email = "Please enter a valid email"

        if not data.subject.strip():
            errors.subject = "Subject is required"

        if not data.message.strip():
            errors.message = "Message is required"
        elif len(data.message) < MIN_MESSAGE_LENGTH:
            errors.message = f"Message must be at least {MIN_MESSAGE_LENGTH} characters"

        self.errors = errors
        return errors.is_empty()

    def submit(self) -> Optional[str]:
        """Validate and, when valid, hand a mailto target to the host.

        Returns the target that was handed off, or None when validation
        failed. Delivery is never confirmed.
        """
        if not self.validate():
            self.status = SubmitStatus.ERROR
            logger.info("Contact form rejected; invalid fields: %s", ", ".join(self.errors.invalid_fields()))
            return None

        body = compose_body(self.data)
        target = build_mail_target(self.recipient, self.data.subject, body)
        if self.navigate is not None:
            self.navigate(target)
        logger.info("Handed contact message off to the mail client for %s", self.recipient)

        self.status = SubmitStatus.SUCCESS
        self.data = FormData()
        return target
