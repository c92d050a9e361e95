"""Report schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReportCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1, max_length=255)
    phone: str | None = Field(default=None, max_length=30)
    cnic: str | None = Field(default=None, max_length=30)
    is_anonymous: bool = False
    image: str | None = Field(default=None, max_length=255)

    model_config = ConfigDict(extra="forbid")


class ReportStatusUpdate(BaseModel):
    status: str


class AdminNoteCreate(BaseModel):
    content: str
    attachment: str | None = Field(default=None, max_length=255)


class AdminNoteRead(BaseModel):
    id: str
    content: str
    attachment: str | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ReportRead(BaseModel):
    id: str
    title: str
    description: str
    location: str
    phone: str | None
    cnic: str | None
    is_anonymous: bool
    user_id: str | None
    image: str | None
    status: str
    notes: list[AdminNoteRead]
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
