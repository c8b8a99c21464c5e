"""Exception hierarchy for email notifications."""


class EmailNotificationError(Exception):
    """Base exception for email notification failures."""


class NoRecipientsError(EmailNotificationError):
    """Raised when no recipients could be resolved for a notification."""

    def __init__(self, message: str = "Error while sending an email: no recipients. Please check the configuration."):
        super().__init__(message)


class SmtpSettingsError(EmailNotificationError):
    """Raised when the SMTP settings in the configuration store fail validation at startup."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid SMTP setting '{key}': {reason}")
