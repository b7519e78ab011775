from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from .models import MessageStatus, SupportMessage

logger = logging.getLogger(__name__)

# Newest first
_messages: list[SupportMessage] = []


def submit_message(name: str, email: str, message: str) -> SupportMessage:
    entry = SupportMessage(
        id=uuid.uuid4().hex[:12],
        name=name.strip(),
        email=email.strip(),
        message=message.strip(),
        submitted_at=datetime.now(timezone.utc).isoformat(),
        read=False,
    )
    _messages.insert(0, entry)
    logger.info("Support message %s received", entry.id)
    return entry


def list_messages(status: MessageStatus | str = MessageStatus.all) -> list[SupportMessage]:
    status = MessageStatus(status)
    if status is MessageStatus.unread:
        return [m for m in _messages if not m.read]
    if status is MessageStatus.read:
        return [m for m in _messages if m.read]
    return list(_messages)


def _find(message_id: str) -> SupportMessage:
    for entry in _messages:
        if entry.id == message_id:
            return entry
    raise KeyError(message_id)


def mark_read(message_id: str) -> SupportMessage:
    entry = _find(message_id)
    entry.read = True
    return entry


def mark_unread(message_id: str) -> SupportMessage:
    entry = _find(message_id)
    entry.read = False
    return entry


def delete_message(message_id: str) -> None:
    _messages.remove(_find(message_id))


def delete_all_messages() -> int:
    count = len(_messages)
    _messages.clear()
    return count


def unread_count() -> int:
    return sum(1 for m in _messages if not m.read)
