from fastapi import Depends, Request
from sqlmodel import Session

from tasktracker.core.tokens import TokenIssuer
from tasktracker.db.session import get_session
from tasktracker.services.auth_service import AuthService
from tasktracker.services.task_service import TaskService
from tasktracker.services.task_store import TaskStore
from tasktracker.services.user_store import UserStore


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_auth_service(
    db: Session = Depends(get_session),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(UserStore(db), tokens)


def get_task_service(db: Session = Depends(get_session)) -> TaskService:
    return TaskService(TaskStore(db))
