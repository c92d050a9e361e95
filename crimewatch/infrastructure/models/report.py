"""SQLAlchemy models for crime reports and their admin notes."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from crimewatch.infrastructure.database import Base
from crimewatch.utils import new_identifier, now_in_app_naive_datetime


class ReportModel(Base):
    """Database representation of a citizen crime report."""

    __tablename__ = "report"

    id = Column(String(36), primary_key=True, default=new_identifier)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String(255), nullable=False)
    phone = Column(String(30), nullable=True)
    cnic = Column(String(30), nullable=True)
    is_anonymous = Column(Boolean, nullable=False, default=False)
    user_id = Column(String(36), nullable=True, index=True)
    image = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default="Pending")
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    notes = relationship(
        "AdminNoteModel",
        back_populates="report",
        cascade="all, delete-orphan",
        order_by="AdminNoteModel.created_at",
        lazy="selectin",
    )


class AdminNoteModel(Base):
    """Note attached to a report by an administrator."""

    __tablename__ = "admin_note"

    id = Column(String(36), primary_key=True, default=new_identifier)
    report_id = Column(
        String(36),
        ForeignKey("report.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content = Column(Text, nullable=False)
    attachment = Column(String(255), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    report = relationship("ReportModel", back_populates="notes")


__all__ = ["ReportModel", "AdminNoteModel"]
