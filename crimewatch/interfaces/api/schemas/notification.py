"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: str
    recipient_type: str = Field(..., alias="recipientType")
    recipient: str | None = None
    type: str
    title: str
    message: str
    report_id: str = Field(..., alias="reportId")
    read: bool
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class NotificationPageRead(BaseModel):
    """Paginated notification listing."""

    notifications: list[NotificationRead]
    unread_count: int = Field(..., alias="unreadCount")
    current_page: int = Field(..., alias="currentPage")
    total_pages: int = Field(..., alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)


class NotificationScopeRequest(BaseModel):
    """Body selecting either all admin notifications or those of one user."""

    is_admin: bool = Field(default=False, alias="isAdmin")
    user_id: str | None = Field(default=None, alias="userId")

    model_config = ConfigDict(populate_by_name=True)


class NotificationBulkResult(BaseModel):
    message: str
    updated: int | None = None
    deleted: int | None = None


class MessageResponse(BaseModel):
    message: str


__all__ = [
    "NotificationRead",
    "NotificationPageRead",
    "NotificationScopeRequest",
    "NotificationBulkResult",
    "MessageResponse",
]
