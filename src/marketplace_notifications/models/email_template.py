"""Model for EmailTemplate."""
import datetime

from sqlalchemy import String, Text, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class EmailTemplate(Base):
    """
    SQLAlchemy model for an email template, keyed by subscription status.
    """
    __tablename__ = 'email_templates'

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    status: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    template_body: Mapped[str | None] = mapped_column(Text, nullable=True)
    subject: Mapped[str | None] = mapped_column(String(255), nullable=True)
    to_recipients: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    cc: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    bcc: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    insert_date: Mapped[datetime.datetime | None] = mapped_column(DateTime, nullable=True)

    def __repr__(self):
        return f"<EmailTemplate(status='{self.status}', subject='{self.subject}')>"
