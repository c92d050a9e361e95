"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, String, Text

from crimewatch.infrastructure.database import Base
from crimewatch.utils import new_identifier, now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for report notifications."""

    __tablename__ = "notification"
    __table_args__ = (
        Index("ix_notification_recipient_read_created", "recipient", "read", "created_at"),
        Index(
            "ix_notification_recipient_type_read_created",
            "recipient_type",
            "read",
            "created_at",
        ),
    )

    id = Column(String(36), primary_key=True, default=new_identifier)
    recipient_type = Column(String(10), nullable=False)
    recipient = Column(String(36), nullable=True)
    type = Column(String(20), nullable=False)
    title = Column(String(120), nullable=False)
    message = Column(Text, nullable=False)
    report_id = Column(
        String(36),
        ForeignKey("report.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["NotificationModel"]
