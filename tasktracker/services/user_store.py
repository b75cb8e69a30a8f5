from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from tasktracker.core.errors import Conflict
from tasktracker.core.security import hash_password, verify_password
from tasktracker.models.user import User

log = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


class UserStore:
    """User persistence: lookup, creation with hashed password, verification."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == _normalize_email(email))
        return self.db.exec(stmt).first()

    def create(self, email: str, password: str) -> User:
        if self.get_by_email(email) is not None:
            raise Conflict("Email already registered")

        user = User(email=_normalize_email(email), password_hash=hash_password(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # concurrent registration won the unique index
            self.db.rollback()
            raise Conflict("Email already registered")
        self.db.refresh(user)
        return user

    def verify_password(self, password: str, user: User) -> bool:
        return verify_password(password, user.password_hash)
