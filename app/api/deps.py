"""
Dependencias reutilizables para routers (FastAPI Depends).

- Autenticación: extrae y valida el bearer token y devuelve el `RequestContext`.
- Servicios: se construyen por petición a partir de los objetos de `app.state`
  (base de datos, token service, hasher), sin lookups globales.
- Mantener esta capa delgada: sin lógica de negocio pesada.
"""
from typing import Optional

from fastapi import Depends, Header, Request
from pymongo.database import Database

from app.core.context import RequestContext
from app.core.exceptions import InternalError, Unauthorized
from app.repositories.note_repo import NoteRepository
from app.repositories.user_repo import UserRepository
from app.services.auth_service import AuthService
from app.services.note_service import NoteService
from app.services.token_service import InvalidToken, TokenService


def get_db(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise InternalError("Database not available")
    return db


def get_token_service(request: Request) -> TokenService:
    tokens = getattr(request.app.state, "token_service", None)
    if tokens is None:
        raise InternalError("Token service not configured")
    return tokens


def get_auth_service(
    request: Request,
    db: Database = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    state = request.app.state
    return AuthService(
        UserRepository(db),
        tokens,
        state.password_hasher,
        password_min_length=state.settings.password_min_length,
    )


def get_note_service(db: Database = Depends(get_db)) -> NoteService:
    return NoteService(NoteRepository(db))


def get_request_context(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    tokens: TokenService = Depends(get_token_service),
) -> RequestContext:
    if not authorization or not authorization.startswith("Bearer "):
        raise Unauthorized("Missing token")
    token = authorization.split(" ", 1)[1].strip()
    try:
        user_id = tokens.verify(token)
    except InvalidToken:
        raise Unauthorized("Invalid token")
    return RequestContext(user_id=user_id, request_id=getattr(request.state, "request_id", None))
