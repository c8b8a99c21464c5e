"""Service for loading transport settings once, at startup."""
import logging

from ..models.smtp_settings import SmtpSettings
from ..repositories.application_config_repo import ApplicationConfigRepository
from ..repositories.database import SessionMaker


def load_smtp_settings() -> SmtpSettings:
    """
    Load and validate the SMTP settings from the configuration store.

    Returns:
        SmtpSettings: The validated settings, to be passed to EmailContentService.

    Raises:
        SmtpSettingsError: If a stored value cannot be parsed.
    """
    with SessionMaker() as db:
        config_repo: ApplicationConfigRepository = ApplicationConfigRepository(db)
        settings: SmtpSettings = SmtpSettings.from_config_repository(config_repo)

    logging.debug("SMTP settings validated at startup.")
    return settings
