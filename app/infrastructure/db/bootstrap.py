"""
Bootstrap de la base Mongo: define y aplica validadores (JSON Schema) e índices.
Se ejecuta al inicio de la app para asegurar colecciones mínimas y consistencia.
Los validadores son best effort; el índice único de email es obligatorio.
"""
from __future__ import annotations

from typing import Any, Dict, List
import logging
from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.repositories.note_repo import COLLECTION as NOTE_COLL
from app.repositories.user_repo import COLLECTION as USER_COLL

_log = logging.getLogger("notes.mongo.bootstrap")


USER_VALIDATOR: Dict[str, Any] = {
    "bsonType": "object",
    "required": ["full_name", "email", "password_hash", "created_on"],
    "properties": {
        "full_name": {"bsonType": "string", "minLength": 1},
        "email": {"bsonType": "string", "minLength": 3},
        "password_hash": {"bsonType": "string"},
        "created_on": {"bsonType": "string", "minLength": 10},
    },
    "additionalProperties": True,
}

NOTE_VALIDATOR: Dict[str, Any] = {
    "bsonType": "object",
    "required": ["title", "content", "tags", "is_pinned", "user_id", "created_on", "updated_on"],
    "properties": {
        "title": {"bsonType": "string", "minLength": 1},
        "content": {"bsonType": "string", "minLength": 1},
        "tags": {"bsonType": "array", "items": {"bsonType": "string"}},
        "is_pinned": {"bsonType": "bool"},
        "user_id": {"bsonType": "string", "minLength": 1},
        "created_on": {"bsonType": "string", "minLength": 10},
        "updated_on": {"bsonType": "string", "minLength": 10},
    },
    "additionalProperties": True,
}


def _collmod_or_create(db: Database, name: str, validator: Dict[str, Any]) -> None:
    try:
        if name in db.list_collection_names():
            db.command({
                "collMod": name,
                "validator": {"$jsonSchema": validator},
                "validationLevel": "moderate",
            })
        else:
            db.create_collection(name, validator={"$jsonSchema": validator})
    except PyMongoError as e:
        # No aborta el arranque; solo deja sin validator estricto.
        _log.warning("No se pudo aplicar validator en '%s': %s", name, e)


def ensure_indexes(db: Database) -> None:
    """Índices requeridos: email único y lookup de notas por dueño.

    Los errores de `create_index` se propagan: sin el índice único no se arranca.
    """
    indexes: Dict[str, List[Dict[str, Any]]] = {
        USER_COLL: [
            {"keys": [("email", ASCENDING)], "name": "uniq_email", "unique": True},
        ],
        NOTE_COLL: [
            {
                "keys": [("user_id", ASCENDING), ("is_pinned", DESCENDING), ("created_on", ASCENDING)],
                "name": "user_pinned_created",
            },
        ],
    }
    for name, specs in indexes.items():
        coll = db[name]
        for ix in specs:
            opts = dict(ix)
            keys = opts.pop("keys")
            coll.create_index(keys, **opts)


def ensure_collections(db: Database) -> None:
    """
    Garantiza colecciones, validadores (best effort) e índices obligatorios.
    """
    _collmod_or_create(db, USER_COLL, USER_VALIDATOR)
    _collmod_or_create(db, NOTE_COLL, NOTE_VALIDATOR)
    ensure_indexes(db)
    _log.info("Colecciones e índices listos")
