from __future__ import annotations

import logging
from dataclasses import dataclass

from tasktracker.core.errors import AuthenticationFailed, ValidationFailed
from tasktracker.core.tokens import REMEMBER_ME_EXPIRES, TokenIssuer
from tasktracker.models.user import User
from tasktracker.services.user_store import UserStore

log = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass
class AuthResult:
    access_token: str
    user: User

    def as_response(self) -> dict:
        return {
            "access_token": self.access_token,
            "user": {"id": self.user.id, "email": self.user.email},
        }


class AuthService:
    """Registration, login and token-subject lookup."""

    def __init__(self, users: UserStore, tokens: TokenIssuer):
        self.users = users
        self.tokens = tokens

    def _issue(self, user: User, *, remember_me: bool = False) -> AuthResult:
        expires = REMEMBER_ME_EXPIRES if remember_me else None
        token = self.tokens.create_access_token(user.id, user.email, expires_delta=expires)
        return AuthResult(access_token=token, user=user)

    def register(self, email: str, password: str, confirm_password: str) -> AuthResult:
        if password != confirm_password:
            raise ValidationFailed("Passwords do not match")

        user = self.users.create(email, password)
        log.info("user registered id=%s", user.id)
        return self._issue(user)

    def login(self, email: str, password: str, remember_me: bool = False) -> AuthResult:
        """
        Unknown email and wrong password fail with the same error so the
        response never reveals which one it was.
        """
        user = self.users.get_by_email(email)
        if user is None or not self.users.verify_password(password, user):
            log.warning("login failed email=%s", email)
            raise AuthenticationFailed(INVALID_CREDENTIALS)

        return self._issue(user, remember_me=remember_me)

    def validate_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)
