from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import (
    AdminSignupClosedError,
    AuthenticationError,
    DuplicateAdminError,
    NotFoundError,
    ValidationError,
)
from .model import Admin, AdminSession
from .repository import AdminRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AdminService:
    """Use case: the single administrator account (signup once, signin, profile)."""

    def __init__(self, admins: AdminRepository, tokens: TokenService):
        self._admins = admins
        self._tokens = tokens

    def exists(self) -> bool:
        return self._admins.any_exists()

    def signup(self, *, username: str, email: str, password: str) -> AdminSession:
        if self._admins.any_exists():
            raise AdminSignupClosedError("Admin already exists. Only one admin is allowed.")

        if not (username or "").strip() or not (email or "").strip() or not password:
            raise ValidationError("Username, email, and password are required.")
        username = username.strip()
        email = email.strip()

        if self._admins.username_or_email_taken(username, email):
            raise DuplicateAdminError("Admin with this username or email already exists.")

        admin_id = self._admins.create(
            username=username,
            email=email,
            password_hash=generate_password_hash(password),
        )
        admin = self.profile(admin_id)
        logger.info("admin %s registered", admin.username)
        return AdminSession(admin=admin, token=self._tokens.issue(admin))

    def signin(self, *, login: str, password: str) -> AdminSession:
        login = require_non_empty(login, "Username")
        if not password:
            raise ValidationError("Username and password are required.")

        admin = self._admins.get_by_login(login)
        try:
            ok = bool(admin) and check_password_hash(admin.password_hash, password)
        except ValueError:
            # e.g. corrupted or placeholder hash values
            ok = False

        if not ok:
            logger.warning("failed admin signin for %r", login)
            raise AuthenticationError("Invalid credentials.")

        logger.info("admin %s signed in", admin.username)
        return AdminSession(admin=admin, token=self._tokens.issue(admin))

    def profile(self, admin_id: int) -> Admin:
        admin = self._admins.get_by_id(int(admin_id))
        if not admin:
            raise NotFoundError("Admin not found.")
        return admin

    def authenticate(self, token: str) -> int:
        return self._tokens.verify(token)
