from __future__ import annotations

from fastapi import Depends, HTTPException, Request

from .users import ADMIN_ROLE


def get_current_user(request: Request) -> dict | None:
    return request.session.get("user")


def require_admin(user: dict | None = Depends(get_current_user)) -> dict:
    """401 without a session, 403 for a session that is not the admin's."""
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    if user.get("role") != ADMIN_ROLE:
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
