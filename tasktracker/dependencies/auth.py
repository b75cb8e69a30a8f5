from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from tasktracker.core.tokens import TokenIssuer
from tasktracker.dependencies.services import get_auth_service, get_token_issuer
from tasktracker.models.user import User
from tasktracker.services.auth_service import AuthService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    tokens: TokenIssuer = Depends(get_token_issuer),
    auth: AuthService = Depends(get_auth_service),
) -> User:
    """Strict auth dependency; raises 401 when the token or its subject is invalid."""
    if not token:
        raise _unauthorized("Not authenticated")

    payload = tokens.decode_access_token(token)
    if payload is None or "sub" not in payload:
        raise _unauthorized("Invalid or expired token")

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise _unauthorized("Invalid token subject")

    user = auth.validate_user(user_id)
    if user is None:
        raise _unauthorized("User no longer exists")
    return user
