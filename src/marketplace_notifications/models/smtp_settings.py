"""Typed SMTP transport settings loaded from the configuration store."""
import logging
from typing import Any

from pydantic import BaseModel

from ..config import (
    SMTP_FROM_EMAIL_KEY, SMTP_PASSWORD_KEY, SMTP_SSL_ENABLED_KEY, SMTP_USER_NAME_KEY, SMTP_PORT_KEY, SMTP_HOST_KEY
)
from ..exceptions import SmtpSettingsError
from ..utils.parsing import parse_bool


class SmtpSettings(BaseModel):
    """SMTP settings validated once, at startup."""
    from_email: str | None = None
    password: str | None = None
    ssl: bool
    user_name: str | None = None
    port: int
    smtp_host: str | None = None

    @classmethod
    def from_config_repository(cls, config_repo: Any) -> "SmtpSettings":
        """
        Read and validate every SMTP key from the configuration store.

        Args:
            config_repo: Anything exposing get_value_by_name(name).

        Returns:
            SmtpSettings: The parsed settings.

        Raises:
            SmtpSettingsError: If the SSL flag or the port cannot be parsed.
        """
        ssl_value = config_repo.get_value_by_name(SMTP_SSL_ENABLED_KEY)
        try:
            ssl = parse_bool(ssl_value)
        except ValueError as e:
            logging.error(f"SMTP setting '{SMTP_SSL_ENABLED_KEY}' is invalid: {e}")
            raise SmtpSettingsError(SMTP_SSL_ENABLED_KEY, str(e)) from e

        port_value = config_repo.get_value_by_name(SMTP_PORT_KEY)
        try:
            port = int(port_value)
        except (TypeError, ValueError) as e:
            logging.error(f"SMTP setting '{SMTP_PORT_KEY}' is invalid: {e}")
            raise SmtpSettingsError(SMTP_PORT_KEY, str(e)) from e

        settings = cls(
            from_email=config_repo.get_value_by_name(SMTP_FROM_EMAIL_KEY),
            password=config_repo.get_value_by_name(SMTP_PASSWORD_KEY),
            ssl=ssl,
            user_name=config_repo.get_value_by_name(SMTP_USER_NAME_KEY),
            port=port,
            smtp_host=config_repo.get_value_by_name(SMTP_HOST_KEY),
        )
        logging.info(f"SMTP settings loaded for host '{settings.smtp_host}' on port {settings.port}.")
        return settings
