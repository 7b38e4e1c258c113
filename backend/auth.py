from __future__ import annotations

from fastapi import Header, HTTPException

from backend.settings import get_settings


async def require_user_id(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    x_backend_token: str | None = Header(default=None, alias="X-Backend-Token"),
) -> str:
    settings = get_settings()
    if not x_backend_token or x_backend_token != settings.backend_session_secret:
        raise HTTPException(status_code=401, detail="Invalid backend token")
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing user id")
    user_id = x_user_id.strip().lower()
    if settings.allowed_emails and user_id not in settings.allowed_emails:
        raise HTTPException(status_code=403, detail="User not allowed")
    return user_id
