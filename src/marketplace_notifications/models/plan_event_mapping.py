"""Model for PlanEventMapping."""
import uuid

from sqlalchemy import String, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class PlanEventMapping(Base):
    """
    SQLAlchemy model mapping a plan and an event to the addresses that should be notified.
    """
    __tablename__ = 'plan_events_mapping'

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    plan_id: Mapped[uuid.UUID] = mapped_column(nullable=False)
    events_id: Mapped[int] = mapped_column(nullable=False)
    success_state_emails: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    failure_state_emails: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    copy_to_customer: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self):
        return f"<PlanEventMapping(plan_id={self.plan_id}, events_id={self.events_id})>"
