"""Pydantic models for email content handed to the mail transport."""
import re

from pydantic import BaseModel

from ..config import RECIPIENT_SEPARATORS


def split_recipients(recipients: str | None) -> list[str]:
    """Split a stored recipient string into individual addresses."""
    if not recipients:
        return []
    pattern = "|".join(re.escape(separator) for separator in RECIPIENT_SEPARATORS)
    return [address.strip() for address in re.split(pattern, recipients) if address.strip()]


class EmailMessage(BaseModel):
    """Represents the structure of an email message handed to the downstream sender."""
    to: list[str]
    cc: list[str] | None = None
    bcc: list[str] | None = None
    subject: str
    html: str | None = None
    plaintext: str | None = None


class EmailContent(BaseModel):
    """Fully resolved content, recipients and transport settings for a notification."""
    subject: str = ""
    body: str = ""
    to_emails: str = ""
    cc_emails: str = ""
    bcc_emails: str = ""
    copy_to_customer: bool = False
    is_active: bool = False

    from_email: str | None = None
    password: str | None = None
    ssl: bool = False
    user_name: str | None = None
    port: int = 0
    smtp_host: str | None = None

    def to_email_message(self, customer_email: str | None = None) -> EmailMessage:
        """
        Build the message the downstream sender expects.

        Args:
            customer_email (str | None): The subscribing customer's address, added to the
                recipients only when copy_to_customer is set.

        Returns:
            EmailMessage: The message with split recipient lists.
        """
        to = split_recipients(self.to_emails)
        if self.copy_to_customer and customer_email and customer_email not in to:
            to.append(customer_email)

        return EmailMessage(
            to=to,
            cc=split_recipients(self.cc_emails) or None,
            bcc=split_recipients(self.bcc_emails) or None,
            subject=self.subject,
            html=self.body,
        )
