from datetime import datetime

from sqlmodel import Field

from .base import BaseModelDB, utcnow


class Note(BaseModelDB, table=True):
    """Note rattachée à un utilisateur."""

    __tablename__ = "notes"

    user_id: int = Field(foreign_key="users.id", index=True)
    title: str
    content: str
    created_at: datetime = Field(default_factory=utcnow)


class NoteTag(BaseModelDB, table=True):
    __tablename__ = "note_tags"

    note_id: int = Field(foreign_key="notes.id", index=True)
    tag: str = Field(index=True)
