from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from ..store import DomainStore
from .model import User
from .session import SessionStore

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: login / logout / register, plus restoring the session marker."""

    def __init__(self, store: DomainStore, sessions: SessionStore):
        self._store = store
        self._sessions = sessions

    def login(self, username: str, password: str) -> User:
        user = self._store.login_user(username or "", password or "")
        if not user:
            logger.info("failed login for %r", username)
            raise AuthenticationError("Invalid username or password")

        self._sessions.save(user)
        logger.info("user %r logged in", user.username)
        return user

    def logout(self) -> None:
        self._sessions.clear()

    def current_user(self) -> Optional[User]:
        return self._sessions.load()

    def register(self, username: str, password: str, role: Role | str) -> User:
        username = require_non_empty(username, "Username")
        password = require_non_empty(password, "Password")
        try:
            role = Role(role)
        except ValueError:
            raise ValidationError("Role is not valid")

        return self._store.register_user(username, password, role)
