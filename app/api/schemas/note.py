"""
Esquemas Pydantic para `note`.

En Mongo los campos van en snake_case; en el wire se exponen con los nombres
camelCase que consume el cliente (`isPinned`, `userId`, `createdOn`, ...).
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Entrada de creación; la obligatoriedad se valida en el servicio."""
    title: Optional[str] = None
    content: Optional[str] = None
    # Si no es lista se ignora (default [])
    tags: Any = None


class NoteUpdate(BaseModel):
    """Actualización parcial.

    `model_fields_set` distingue "no enviado" de "enviado como null/false".
    """
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None
    is_pinned: Optional[bool] = Field(default=None, alias="isPinned")


class NotePinnedUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_pinned: bool = Field(alias="isPinned")


class NoteOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    content: str
    tags: List[str] = Field(default_factory=list)
    is_pinned: bool = Field(default=False, alias="isPinned")
    user_id: str = Field(alias="userId")
    created_on: str = Field(alias="createdOn")
    updated_on: str = Field(alias="updatedOn")

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "NoteOut":
        return cls(
            id=str(doc["_id"]),
            title=doc["title"],
            content=doc["content"],
            tags=list(doc.get("tags") or []),
            is_pinned=bool(doc.get("is_pinned", False)),
            user_id=str(doc["user_id"]),
            created_on=doc["created_on"],
            updated_on=doc.get("updated_on") or doc["created_on"],
        )


class NoteResponse(BaseModel):
    error: bool = False
    note: NoteOut
    message: str


class NoteListResponse(BaseModel):
    error: bool = False
    notes: List[NoteOut]
    message: str


class MessageResponse(BaseModel):
    error: bool = False
    message: str
