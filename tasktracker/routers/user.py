from fastapi import APIRouter, Depends

from tasktracker.dependencies.auth import get_current_user
from tasktracker.models.user import User
from tasktracker.schemas.auth import UserSummary

user_router = APIRouter(prefix="/users", tags=["users"])


@user_router.get("/me", response_model=UserSummary)
def get_me(user: User = Depends(get_current_user)):
    return user
