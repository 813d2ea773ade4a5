from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from app.api.v1.dependencies import get_note_service
from app.features.notes.schemas import NoteCreate, NoteOut, NoteTagOut
from app.features.notes.services import NoteService
from app.features.todos.schemas import TagCreate

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    responses={404: {"description": "Not Found"}},
)


@router.post(
    "",
    summary="Créer une note",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteOut,
)
def create_note(payload: NoteCreate, svc: NoteService = Depends(get_note_service)):
    return svc.create(payload)


@router.post(
    "/{note_id}/tags",
    summary="Ajouter un tag à une note",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteTagOut,
)
def add_note_tag(note_id: int, payload: TagCreate, svc: NoteService = Depends(get_note_service)):
    tag = svc.add_tag(note_id, payload.tag)
    if tag is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found.")
    return tag


@router.get(
    "/{user_id}",
    summary="Lister les notes d'un utilisateur",
    response_model=List[NoteOut],
)
def list_user_notes(user_id: int, svc: NoteService = Depends(get_note_service)):
    return svc.list_for_user(user_id)


@router.get(
    "/{user_id}/{tag}",
    summary="Lister les notes d'un utilisateur portant un tag",
    response_model=List[NoteOut],
)
def list_user_notes_by_tag(user_id: int, tag: str, svc: NoteService = Depends(get_note_service)):
    return svc.list_for_user_by_tag(user_id, tag)
