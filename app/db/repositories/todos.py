"""
➡️ But : Encapsuler toutes les opérations de base de données sur les todos.

TodoRepository    : requêtes sur la table "todos".
TodoTagRepository : requêtes sur la table "todo_tags" (utilisé par le TagAggregator).

Ne contient aucune logique métier, juste de la persistance.
"""

from typing import Iterable, Sequence

from sqlmodel import col, select

from app.db.repositories.base import BaseRepository, id_in_range
from app.db.models.todos import Todo, TodoTag


class TodoRepository(BaseRepository[Todo]):
    model = Todo

    def list(self) -> Sequence[Todo]:
        with self.store_errors():
            return self.session.exec(select(Todo).order_by(Todo.id)).all()

    def list_by_id(self, todo_id: int) -> Sequence[Todo]:
        """0 ou 1 ligne : l'appelant passe le résultat au TagAggregator tel quel."""
        if not id_in_range(todo_id):
            return []
        with self.store_errors():
            return self.session.exec(select(Todo).where(Todo.id == todo_id)).all()

    def search_by_title(self, query: str) -> Sequence[Todo]:
        """Sous-chaîne insensible à la casse (ILIKE %query%)."""
        stmt = select(Todo).where(col(Todo.title).ilike(f"%{query}%")).order_by(Todo.id)
        with self.store_errors():
            return self.session.exec(stmt).all()

    def list_by_tag(self, tag: str) -> Sequence[Todo]:
        tagged = select(TodoTag.todo_id).where(TodoTag.tag == tag)
        stmt = select(Todo).where(col(Todo.id).in_(tagged)).order_by(Todo.id)
        with self.store_errors():
            return self.session.exec(stmt).all()


class TodoTagRepository(BaseRepository[TodoTag]):
    model = TodoTag
    parent_key = "todo_id"

    def list_for_parents(self, parent_ids: Iterable[int]) -> Sequence[TodoTag]:
        stmt = select(TodoTag).where(col(TodoTag.todo_id).in_(list(parent_ids)))
        with self.store_errors():
            return self.session.exec(stmt).all()
