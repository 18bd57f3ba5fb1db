"""
Service layer for notes: validation and ownership rules over `NoteRepository`.

Every operation receives the caller's `RequestContext`; a note that belongs to
someone else is reported exactly like a missing one (`NotFound`).
"""
import logging
from typing import Any, Dict, List

from app.api.schemas.note import NoteCreate, NoteUpdate
from app.core.context import RequestContext
from app.core.exceptions import InvalidQuery, NoChanges, NotFound, ValidationError
from app.repositories.note_repo import NoteRepository

_log = logging.getLogger("notes.notes")


def _clean_tags(tags: Any) -> List[str]:
    if not isinstance(tags, list):
        return []
    return [str(t) for t in tags]


class NoteService:
    def __init__(self, repo: NoteRepository) -> None:
        self.repo = repo

    def create(self, ctx: RequestContext, payload: NoteCreate) -> Dict[str, Any]:
        if not payload.title:
            raise ValidationError("Title is required")
        if not payload.content:
            raise ValidationError("Content is required")
        doc = self.repo.insert(ctx.user_id, payload.title, payload.content, _clean_tags(payload.tags))
        _log.info("nota creada note_id=%s user_id=%s request_id=%s", doc["_id"], ctx.user_id, ctx.request_id)
        return doc

    def edit(self, ctx: RequestContext, note_id: str, payload: NoteUpdate) -> Dict[str, Any]:
        """Aplica solo los campos enviados.

        - title/content: enviados y no vacíos.
        - tags: enviados y no null (`[]` limpia los tags).
        - isPinned: solo si viene explícito (false incluido); no cuenta como cambio.
        """
        sent = payload.model_fields_set
        changes: Dict[str, Any] = {}
        if "title" in sent and payload.title:
            changes["title"] = payload.title
        if "content" in sent and payload.content:
            changes["content"] = payload.content
        if "tags" in sent and payload.tags is not None:
            changes["tags"] = list(payload.tags)
        if not changes:
            raise NoChanges()
        if "is_pinned" in sent and payload.is_pinned is not None:
            changes["is_pinned"] = payload.is_pinned

        doc = self.repo.update(note_id, ctx.user_id, changes)
        if doc is None:
            raise NotFound()
        return doc

    def set_pinned(self, ctx: RequestContext, note_id: str, is_pinned: bool) -> Dict[str, Any]:
        doc = self.repo.update(note_id, ctx.user_id, {"is_pinned": bool(is_pinned)})
        if doc is None:
            raise NotFound()
        return doc

    def delete(self, ctx: RequestContext, note_id: str) -> None:
        if not self.repo.delete(note_id, ctx.user_id):
            raise NotFound("Note Not Found")
        _log.info("nota eliminada note_id=%s user_id=%s request_id=%s", note_id, ctx.user_id, ctx.request_id)

    def list(self, ctx: RequestContext) -> List[Dict[str, Any]]:
        return self.repo.list_by_owner(ctx.user_id)

    def search(self, ctx: RequestContext, query: str | None) -> List[Dict[str, Any]]:
        if not query:
            raise InvalidQuery()
        notes = self.repo.search(ctx.user_id, query)
        if not notes:
            raise NotFound("No notes found matching the query")
        return notes
