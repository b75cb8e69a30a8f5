from fastapi import APIRouter, Depends, status

from tasktracker.dependencies.services import get_auth_service
from tasktracker.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from tasktracker.services.auth_service import AuthService

auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    auth: AuthService = Depends(get_auth_service),
):
    result = auth.register(body.email, body.password, body.confirm_password)
    return result.as_response()


@auth_router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
):
    result = auth.login(body.email, body.password, remember_me=body.remember_me)
    return result.as_response()
