"""Cliente MongoDB (pymongo) con conexión única e idempotente.

El cliente se construye una sola vez en el arranque y se entrega explícitamente
a los repositorios (vía `app.state`), nunca por lookup global.
"""
from __future__ import annotations

import logging
import time
from typing import Optional

import certifi
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.config import Settings

_log = logging.getLogger("notes.mongo")


class MongoConnection:
    """Mantiene el `MongoClient` y la base; `connect()` puede llamarse varias veces."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._client: Optional[MongoClient] = None
        self._db: Optional[Database] = None

    def _client_kwargs(self) -> dict:
        s = self.settings
        kwargs = dict(serverSelectionTimeoutMS=s.mongo_server_selection_timeout_ms)
        if s.mongo_uri.startswith("mongodb+srv://"):
            # SRV ya implica TLS; proveemos CA bundle para robustez
            kwargs["tlsCAFile"] = certifi.where()
            if s.mongo_tls_insecure:
                kwargs["tlsAllowInvalidCertificates"] = True
            if s.mongo_tls_allow_invalid_hostnames:
                kwargs["tlsAllowInvalidHostnames"] = True
        return kwargs

    def connect(self) -> Database:
        """Conecta y valida con `ping`, reintentando `mongo_connect_retries` veces.

        Si ya hay conexión, devuelve la misma base sin crear otro cliente.
        """
        if self._db is not None:
            return self._db

        s = self.settings
        attempts = max(1, s.mongo_connect_retries)
        last_error: Exception | None = None
        for attempt in range(1, attempts + 1):
            client = MongoClient(s.mongo_uri, **self._client_kwargs())
            try:
                client.admin.command("ping")
            except PyMongoError as e:
                client.close()
                last_error = e
                _log.warning("Mongo no accesible (intento %s/%s): %s", attempt, attempts, e)
                if attempt < attempts:
                    time.sleep(s.mongo_connect_retry_delay_seconds)
                continue
            self._client = client
            self._db = client[s.mongo_db]
            _log.info("Mongo conectado db=%s", s.mongo_db)
            return self._db

        raise RuntimeError(f"No se pudo conectar a Mongo tras {attempts} intentos") from last_error

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
        self._client = None
        self._db = None


def ping(db: Database) -> bool:
    """True si la base responde a `ping`."""
    try:
        db.command("ping")
        return True
    except PyMongoError:
        return False
