"""Rutas de autenticación: registro, login y usuario actual."""
from fastapi import APIRouter, Depends, status

from app.api.deps import get_auth_service, get_request_context
from app.api.schemas.auth import LoginPayload, RegisterPayload, TokenResponse
from app.api.schemas.user import UserOut, UserResponse
from app.core.context import RequestContext
from app.services.auth_service import AuthService

router = APIRouter(tags=["Auth"])


@router.post(
    "/create-account",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Registrar usuario",
    description="Valida payload, guarda el usuario con password hasheado y emite access token.",
)
def create_account(payload: RegisterPayload, service: AuthService = Depends(get_auth_service)):
    token = service.register(payload.full_name, payload.email, payload.password)
    return TokenResponse(message="Registration successful", access_token=token)


@router.post("/login", response_model=TokenResponse, summary="Login con email y password")
def login(payload: LoginPayload, service: AuthService = Depends(get_auth_service)):
    token = service.login(payload.email, payload.password)
    return TokenResponse(message="Login successful", access_token=token)


@router.get(
    "/get-user",
    response_model=UserResponse,
    summary="Usuario actual",
    description="Devuelve información básica del usuario autenticado.",
)
def get_user(
    ctx: RequestContext = Depends(get_request_context),
    service: AuthService = Depends(get_auth_service),
):
    user = UserOut.from_doc(service.current_user(ctx))
    return UserResponse(user=user, message="", created_on=user.created_on)
