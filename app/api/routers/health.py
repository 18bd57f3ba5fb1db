"""Health (sin auth), salidas tipadas y estables."""
from fastapi import APIRouter, Request, status

from app.api.schemas.health import HealthOut, PingOut, RootOut
from app.infrastructure.db import mongo


router = APIRouter(tags=["Health"])  # no prefix to keep paths stable


@router.get("/", response_model=RootOut, summary="Raíz")
def root() -> RootOut:
    return RootOut(data="Hello, World!")


@router.get("/ping", response_model=PingOut, summary="Ping básico")
def ping() -> PingOut:
    return PingOut(message="pong")


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthOut, summary="Salud básica")
def health(request: Request) -> HealthOut:
    db = getattr(request.app.state, "db", None)
    return HealthOut(ok=True, db=db is not None and mongo.ping(db))
