"""
➡️ But : Contenir la logique métier des todos : orchestrer les repos, rattacher les tags.

TodoService : chaque opération = une requête sur "todos" (+ une requête de tags pour les lectures).

Absence -> None / False (la route en fait un 404).
Échec de la base -> StoreFailure / ValidationFailure, jamais avalés ici.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
from typing import Any, Dict, List, Optional

from app.db.repositories.todos import TodoRepository, TodoTagRepository
from app.features.tags import TagAggregator
from app.features.todos.schemas import TodoOut, TodoTagOut, TodoUpdate

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self, *, repo: TodoRepository, tag_repo: TodoTagRepository):
        self.repo = repo
        self.tag_repo = tag_repo
        self.aggregator = TagAggregator(tag_repo)

    # --------------- Helpers ---------------
    def _with_tags(self, todos) -> List[TodoOut]:
        return [TodoOut.model_validate(item) for item in self.aggregator.attach_tags(todos)]

    # --------------- Queries ---------------
    def list(self) -> List[TodoOut]:
        return self._with_tags(self.repo.list())

    def get(self, todo_id: int) -> Optional[TodoOut]:
        found = self._with_tags(self.repo.list_by_id(todo_id))
        return found[0] if found else None

    def search_by_title(self, query: str) -> List[TodoOut]:
        return self._with_tags(self.repo.search_by_title(query))

    def list_by_tag(self, tag: str) -> List[TodoOut]:
        return self._with_tags(self.repo.list_by_tag(tag))

    # --------------- Commands ---------------
    def create(self, title: Optional[str], description: Optional[str]) -> TodoOut:
        todo = self.repo.create(title=title, description=description)
        logger.info("todo created id=%s", todo.id)
        return TodoOut.model_validate({**todo.model_dump(), "tags": []})

    def update(self, todo_id: int, payload: TodoUpdate) -> Optional[TodoOut]:
        todo = self.repo.get(todo_id)
        if not todo:
            return None

        changes: Dict[str, Any] = payload.model_dump(exclude_unset=True)
        if changes:
            todo = self.repo.update(todo, **changes)
            logger.info("todo updated id=%s fields=%s", todo_id, sorted(changes))
        return self._with_tags([todo])[0]

    def delete(self, todo_id: int) -> bool:
        todo = self.repo.get(todo_id)
        if not todo:
            return False
        # Pas de cascade : les lignes de todo_tags restent en place
        self.repo.delete(todo)
        logger.info("todo deleted id=%s", todo_id)
        return True

    def add_tag(self, todo_id: int, tag: Optional[str]) -> Optional[TodoTagOut]:
        if not self.repo.get(todo_id):
            return None
        row = self.tag_repo.create(todo_id=todo_id, tag=tag)
        logger.info("tag %r added to todo id=%s", tag, todo_id)
        return TodoTagOut.model_validate(row)
