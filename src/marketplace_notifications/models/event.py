"""Model for Event."""
import datetime

from sqlalchemy import String, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Event(Base):
    """
    SQLAlchemy model for a subscription lifecycle event (e.g. Activate, Unsubscribe).
    """
    __tablename__ = 'events'

    events_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    events_name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    create_date: Mapped[datetime.datetime | None] = mapped_column(DateTime, nullable=True)

    def __repr__(self):
        return f"<Event(events_id={self.events_id}, events_name='{self.events_name}')>"
