# tasktracker/core/tokens.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt

from tasktracker.core.config import Settings

# rememberMe 로그인 세션 유효기간
REMEMBER_ME_EXPIRES = timedelta(days=30)


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass(frozen=True)
class TokenIssuer:
    """Signs and verifies stateless access tokens.

    Claims: ``sub`` (user id as string), ``email``, ``typ``, ``iat``, ``exp``.
    Validity is the signature plus ``exp``; there is no revocation list.
    """

    secret: str
    algorithm: str = "HS256"
    default_expires: timedelta = timedelta(minutes=1440)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            secret=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            default_expires=timedelta(minutes=settings.access_token_expire_minutes),
        )

    def _make_jwt(self, payload: Dict[str, Any], expires: timedelta) -> str:
        now = _utcnow()
        to_encode = payload.copy()
        to_encode["iat"] = int(now.timestamp())
        to_encode["exp"] = int((now + expires).timestamp())
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def create_access_token(
        self, user_id: int, email: str, expires_delta: timedelta | None = None
    ) -> str:
        payload = {"sub": str(user_id), "email": email, "typ": "access"}
        return self._make_jwt(payload, expires_delta or self.default_expires)

    def verify_access_token(self, token: str) -> Dict[str, Any]:
        """
        유효한 Access Token이면 payload(dict)를 반환,
        서명 불일치·만료·type 오류가 나면 JWTError를 던진다.
        """
        payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        if payload.get("typ") != "access":
            raise JWTError("Invalid token type")
        return payload

    def decode_access_token(self, token: str) -> Dict[str, Any] | None:
        """verify_access_token wrapper; None on any verification failure."""
        try:
            return self.verify_access_token(token)
        except JWTError:
            return None
