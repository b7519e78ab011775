from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class SupportMessageIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(default="", max_length=320)
    message: str = Field(..., min_length=1, max_length=5000)


class SupportMessage(BaseModel):
    id: str
    name: str
    email: str
    message: str
    submitted_at: str
    read: bool = False


class MessageStatus(str, Enum):
    all = "all"
    unread = "unread"
    read = "read"


class InboxResponse(BaseModel):
    messages: list[SupportMessage]
    total: int
    unread: int
