"""Model for Subscription."""
import uuid

from sqlalchemy import String, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Subscription(Base):
    """
    SQLAlchemy model for a marketplace SaaS subscription.
    """
    __tablename__ = 'subscriptions'

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    amp_subscription_id: Mapped[uuid.UUID] = mapped_column(unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    subscription_status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    amp_plan_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    amp_quantity: Mapped[int | None] = mapped_column(nullable=True)
    customer_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    customer_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self):
        return f"<Subscription(amp_subscription_id={self.amp_subscription_id}, name='{self.name}')>"
