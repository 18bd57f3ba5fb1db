"""Repo de la colección `note`.

Toda lectura/escritura filtra por (`_id`, `user_id`): el id de la nota por sí
solo nunca es llave suficiente.
"""
import re
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.database import Database

from app.core.time import now_iso

COLLECTION = "note"

# Fijados primero; después orden de creación
_LIST_SORT = [("is_pinned", DESCENDING), ("created_on", ASCENDING), ("_id", ASCENDING)]


def _owned(note_id: str, user_id: str) -> Optional[Dict[str, Any]]:
    if not ObjectId.is_valid(note_id):
        return None
    return {"_id": ObjectId(note_id), "user_id": str(user_id)}


class NoteRepository:
    def __init__(self, db: Database) -> None:
        self.coll = db[COLLECTION]

    def insert(self, user_id: str, title: str, content: str, tags: List[str]) -> Dict[str, Any]:
        """Inserta nota con defaults y devuelve el documento completo."""
        now = now_iso()
        doc = {
            "title": title,
            "content": content,
            "tags": list(tags),
            "is_pinned": False,
            "user_id": str(user_id),
            "created_on": now,
            "updated_on": now,
        }
        res = self.coll.insert_one(doc)
        doc["_id"] = res.inserted_id
        return doc

    def update(self, note_id: str, user_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Aplica `$set` parcial y devuelve la nota actualizada (None si no es del dueño)."""
        filtro = _owned(note_id, user_id)
        if filtro is None:
            return None
        data = dict(changes)
        data["updated_on"] = now_iso()
        return self.coll.find_one_and_update(
            filtro, {"$set": data}, return_document=ReturnDocument.AFTER
        )

    def delete(self, note_id: str, user_id: str) -> bool:
        filtro = _owned(note_id, user_id)
        if filtro is None:
            return False
        return self.coll.delete_one(filtro).deleted_count == 1

    def list_by_owner(self, user_id: str) -> List[Dict[str, Any]]:
        return list(self.coll.find({"user_id": str(user_id)}).sort(_LIST_SORT))

    def search(self, user_id: str, query: str) -> List[Dict[str, Any]]:
        """Substring case-insensitive en título o contenido (query escapado, no regex)."""
        pattern = {"$regex": re.escape(query), "$options": "i"}
        filtro = {
            "user_id": str(user_id),
            "$or": [{"title": pattern}, {"content": pattern}],
        }
        return list(self.coll.find(filtro).sort(_LIST_SORT))
