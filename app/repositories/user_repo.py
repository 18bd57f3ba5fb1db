"""
Repositorio para la colección `user` (credenciales).

- `email` se guarda tal cual llega (sin normalizar mayúsculas).
- Nunca guarda el password en claro: recibe el hash ya calculado.
"""
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import DuplicateKey
from app.core.time import now_iso

COLLECTION = "user"


class UserRepository:
    def __init__(self, db: Database) -> None:
        self.coll = db[COLLECTION]

    def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return self.coll.find_one({"email": email})

    def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Obtiene usuario por id (str); un id mal formado equivale a inexistente."""
        if not ObjectId.is_valid(user_id):
            return None
        return self.coll.find_one({"_id": ObjectId(user_id)})

    def create(self, full_name: str, email: str, password_hash: str) -> Dict[str, Any]:
        """Inserta el usuario y devuelve el documento con `_id`.

        Lanza `DuplicateKey` si el email ya existe; el índice único cubre la
        carrera entre dos registros simultáneos.
        """
        if self.find_by_email(email) is not None:
            raise DuplicateKey()
        doc = {
            "full_name": full_name,
            "email": email,
            "password_hash": password_hash,
            "created_on": now_iso(),
        }
        try:
            res = self.coll.insert_one(doc)
        except DuplicateKeyError as e:
            raise DuplicateKey() from e
        doc["_id"] = res.inserted_id
        return doc
