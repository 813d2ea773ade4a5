from typing import Iterable, Sequence

from sqlmodel import col, select

from app.db.repositories.base import BaseRepository, id_in_range
from app.db.models.notes import Note, NoteTag


class NoteRepository(BaseRepository[Note]):
    model = Note

    def list_by_user(self, user_id: int) -> Sequence[Note]:
        if not id_in_range(user_id):
            return []
        stmt = select(Note).where(Note.user_id == user_id).order_by(Note.id)
        with self.store_errors():
            return self.session.exec(stmt).all()

    def list_by_user_and_tag(self, user_id: int, tag: str) -> Sequence[Note]:
        """Notes de l'utilisateur portant au moins une fois le tag."""
        if not id_in_range(user_id):
            return []
        tagged = select(NoteTag.note_id).where(NoteTag.tag == tag)
        stmt = (
            select(Note)
            .where(Note.user_id == user_id, col(Note.id).in_(tagged))
            .order_by(Note.id)
        )
        with self.store_errors():
            return self.session.exec(stmt).all()


class NoteTagRepository(BaseRepository[NoteTag]):
    model = NoteTag
    parent_key = "note_id"

    def list_for_parents(self, parent_ids: Iterable[int]) -> Sequence[NoteTag]:
        stmt = select(NoteTag).where(col(NoteTag.note_id).in_(list(parent_ids)))
        with self.store_errors():
            return self.session.exec(stmt).all()
