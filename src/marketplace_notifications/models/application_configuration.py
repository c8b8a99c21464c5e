"""Model for ApplicationConfiguration."""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class ApplicationConfiguration(Base):
    """
    SQLAlchemy model for a name/value pair in the application configuration store.
    """
    __tablename__ = 'application_configuration'

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    value: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self):
        return f"<ApplicationConfiguration(name='{self.name}')>"
