"""
➡️ But : Tables des todos et de leurs tags.

Todo     -> table "todos"
TodoTag  -> table "todo_tags" (plusieurs tags par todo, pas d'unicité (todo_id, tag))

⚠️ Pas de suppression en cascade : supprimer un todo laisse ses tags orphelins.
"""

from datetime import datetime

from sqlmodel import Field

from .base import BaseModelDB, utcnow


class Todo(BaseModelDB, table=True):
    __tablename__ = "todos"

    title: str = Field(index=True)
    description: str
    completed: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utcnow)


class TodoTag(BaseModelDB, table=True):
    __tablename__ = "todo_tags"

    todo_id: int = Field(foreign_key="todos.id", index=True)
    tag: str = Field(index=True)
