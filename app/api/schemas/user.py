"""
Esquemas Pydantic para la colección `user` (salidas públicas, sin secretos).
"""
from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field


class UserOut(BaseModel):
    """Resumen público del usuario: nunca incluye `password_hash`."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    full_name: str = Field(alias="fullName")
    email: str
    created_on: str = Field(alias="createdOn")

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "UserOut":
        return cls(
            id=str(doc["_id"]),
            full_name=doc["full_name"],
            email=doc["email"],
            created_on=doc["created_on"],
        )


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user: UserOut
    message: str = ""
    created_on: str = Field(alias="createdOn")
