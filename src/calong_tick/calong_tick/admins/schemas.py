from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class SignupRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class SigninRequest(BaseModel):
    # Either the username or the email address.
    username: Optional[str] = None
    password: Optional[str] = None
