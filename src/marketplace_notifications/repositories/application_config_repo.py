"""Repository for the application configuration store."""
import logging

from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.application_configuration import ApplicationConfiguration


class ApplicationConfigRepository:
    """
    Repository for reading name/value pairs from the application configuration store.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_value_by_name(self, name: str) -> str | None:
        """
        Get a configuration value by its name.

        Args:
            name (str): The configuration key, e.g. "SMTPHost".

        Returns:
            str | None: The stored value, or None if the key is not configured.
        """
        stmt: Select = Select(ApplicationConfiguration.value).where(ApplicationConfiguration.name == name)
        try:
            value = self.session.execute(stmt).scalars().first()
        except SQLAlchemyError as e:
            logging.error(f"Database error reading configuration '{name}': {e}")
            self.session.rollback()
            raise

        if value is None:
            logging.warning(f"Configuration '{name}' is not set.")
        return value
