"""
Endpoints de notas. Todas requieren bearer token y operan solo sobre notas del
usuario autenticado.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_note_service, get_request_context
from app.api.schemas.note import (
    MessageResponse,
    NoteCreate,
    NoteListResponse,
    NoteOut,
    NotePinnedUpdate,
    NoteResponse,
    NoteUpdate,
)
from app.core.context import RequestContext
from app.core.exceptions import NotFound, ValidationError
from app.services.note_service import NoteService


router = APIRouter(tags=["Note"])


@router.post("/add-note", response_model=NoteResponse, summary="Crear nota")
def add_note(
    payload: NoteCreate,
    ctx: RequestContext = Depends(get_request_context),
    service: NoteService = Depends(get_note_service),
):
    doc = service.create(ctx, payload)
    return NoteResponse(note=NoteOut.from_doc(doc), message="Note added successfully")


@router.put(
    "/edit-note/{note_id}",
    response_model=NoteResponse,
    summary="Editar nota",
    description="Actualización parcial: solo se aplican los campos enviados.",
)
def edit_note(
    note_id: str,
    payload: NoteUpdate,
    ctx: RequestContext = Depends(get_request_context),
    service: NoteService = Depends(get_note_service),
):
    doc = service.edit(ctx, note_id, payload)
    return NoteResponse(note=NoteOut.from_doc(doc), message="Note updated successfully")


@router.get("/get-all-notes", response_model=NoteListResponse, summary="Listar notas (fijadas primero)")
def get_all_notes(
    ctx: RequestContext = Depends(get_request_context),
    service: NoteService = Depends(get_note_service),
):
    notes = [NoteOut.from_doc(d) for d in service.list(ctx)]
    return NoteListResponse(notes=notes, message="All notes retrieved successfully")


@router.delete("/delete-note/{note_id}", response_model=MessageResponse, summary="Eliminar nota")
def delete_note(
    note_id: str,
    ctx: RequestContext = Depends(get_request_context),
    service: NoteService = Depends(get_note_service),
):
    try:
        service.delete(ctx, note_id)
    except NotFound as e:
        # El contrato del cliente responde 400 al borrar una nota inexistente
        raise ValidationError(e.message) from e
    return MessageResponse(message="Note deleted successfully")


@router.put("/update-note-pinned/{note_id}", response_model=NoteResponse, summary="Fijar/desfijar nota")
def update_note_pinned(
    note_id: str,
    payload: NotePinnedUpdate,
    ctx: RequestContext = Depends(get_request_context),
    service: NoteService = Depends(get_note_service),
):
    doc = service.set_pinned(ctx, note_id, payload.is_pinned)
    return NoteResponse(note=NoteOut.from_doc(doc), message="Note updated successfully")


@router.get("/search-notes", response_model=NoteListResponse, summary="Buscar notas")
@router.get("/search-notes/", response_model=NoteListResponse, include_in_schema=False)
def search_notes(
    query: Optional[str] = Query(default=None),
    ctx: RequestContext = Depends(get_request_context),
    service: NoteService = Depends(get_note_service),
):
    notes = [NoteOut.from_doc(d) for d in service.search(ctx, query)]
    return NoteListResponse(notes=notes, message="Notes matching the search query retrieved successfully")
