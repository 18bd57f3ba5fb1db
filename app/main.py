"""Entrada principal de la app FastAPI (configura middlewares, excepciones y routers).

`create_app` arma la app con objetos explícitos en `app.state`: settings, token
service, hasher de passwords y la base Mongo (inyectada en tests o conectada en
el arranque).
"""
import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.api.router import api_router
from app.core.config import Settings, get_settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import setup_logging
from app.core.middleware import add_middlewares
from app.infrastructure.db.bootstrap import ensure_collections
from app.infrastructure.db.mongo import MongoConnection
from app.services.auth_service import build_password_hasher
from app.services.token_service import TokenService

_log = logging.getLogger("notes.startup")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown: valida la llave JWT y conecta Mongo una sola vez.

    Si el índice único de email no se puede crear, el arranque se aborta.
    """
    settings: Settings = app.state.settings
    if app.state.token_service is None:
        raise RuntimeError("JWT_SECRET no configurado")

    connection: Optional[MongoConnection] = None
    if app.state.db is None:
        connection = MongoConnection(settings)
        # connect() y el bootstrap bloquean (ping, sleep entre reintentos)
        db = await run_in_threadpool(connection.connect)
        try:
            await run_in_threadpool(ensure_collections, db)
        except PyMongoError:
            _log.exception("No se pudieron crear los índices requeridos")
            connection.close()
            raise
        app.state.db = db
    _log.info("%s iniciada", settings.app_name)
    yield
    if connection is not None:
        connection.close()
        app.state.db = None
    _log.info("%s detenida", settings.app_name)


def create_app(settings: Optional[Settings] = None, db: Optional[Database] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db
    app.state.password_hasher = build_password_hasher(settings)
    app.state.token_service = (
        TokenService(
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expires=timedelta(minutes=settings.access_token_expire_minutes),
        )
        if settings.jwt_configured
        else None
    )

    add_middlewares(app, settings)
    register_exception_handlers(app)

    # Monta routers bajo el prefijo configurado (vacío: rutas en la raíz)
    app.include_router(api_router, prefix=settings.api_prefix_normalized)
    return app


app = create_app()
