# Uses python-jose to create/verify the admin bearer tokens.
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from ..core.exceptions import AuthenticationError
from .model import Admin


class TokenService:
    def __init__(self, secret: str, *, algorithm: str = "HS256", expires_minutes: int = 60):
        self._secret = secret
        self._algorithm = algorithm
        self._expires_minutes = int(expires_minutes)

    def issue(self, admin: Admin) -> str:
        expire = datetime.now(timezone.utc) + timedelta(minutes=self._expires_minutes)
        payload = {
            "sub": str(admin.admin_id),
            "id": admin.admin_id,
            "username": admin.username,
            "email": admin.email,
            "exp": expire,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> int:
        """Return the admin id carried by a valid, unexpired token."""
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError:
            raise AuthenticationError("Invalid or expired token.")

        admin_id = payload.get("id") or payload.get("sub")
        try:
            return int(admin_id)
        except (TypeError, ValueError):
            raise AuthenticationError("Invalid or expired token.")
