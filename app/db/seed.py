"""
➡️ But : Remplir la base avec des données de démo décrites dans un YAML.

Format attendu :

todos:
  - title: ...
    description: ...
    completed: false      # optionnel
    tags: [maison, urgent]
users:
  - name: ...
    email: ...
    notes:
      - title: ...
        content: ...
        tags: [perso]

Tout passe par les services : mêmes règles que l'API.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from sqlmodel import Session

from app.db.repositories.notes import NoteRepository, NoteTagRepository
from app.db.repositories.todos import TodoRepository, TodoTagRepository
from app.db.repositories.users import UserRepository
from app.features.notes.schemas import NoteCreate
from app.features.notes.services import NoteService
from app.features.todos.schemas import TodoUpdate
from app.features.todos.services import TodoService
from app.features.users.services import UserService

logger = logging.getLogger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Seeders
# -----------------------------
def seed_todos(svc: TodoService, data: Dict[str, Any]) -> int:
    count = 0
    for item in data.get("todos", []) or []:
        todo = svc.create(title=item.get("title"), description=item.get("description", ""))
        if item.get("completed"):
            svc.update(todo.id, TodoUpdate(completed=True))
        for tag in item.get("tags", []) or []:
            svc.add_tag(todo.id, tag)
        count += 1
    return count


def seed_users_and_notes(users: UserService, notes: NoteService, data: Dict[str, Any]) -> int:
    count = 0
    for item in data.get("users", []) or []:
        user = users.get_by_email(item["email"])
        if user is None:
            user = users.create(name=item.get("name"), email=item["email"])
        for raw in item.get("notes", []) or []:
            note = notes.create(NoteCreate(user_id=user.id, title=raw.get("title"), content=raw.get("content", "")))
            for tag in raw.get("tags", []) or []:
                notes.add_tag(note.id, tag)
            count += 1
    return count


def seed_all(*, session: Session, seed_path: str | Path) -> Dict[str, int]:
    data = load_seed_yaml(seed_path)

    todo_svc = TodoService(repo=TodoRepository(session), tag_repo=TodoTagRepository(session))
    user_svc = UserService(UserRepository(session))
    note_svc = NoteService(repo=NoteRepository(session), tag_repo=NoteTagRepository(session))

    stats = {
        "todos": seed_todos(todo_svc, data),
        "notes": seed_users_and_notes(user_svc, note_svc, data),
    }
    logger.info("seed done: %s", stats)
    return stats
