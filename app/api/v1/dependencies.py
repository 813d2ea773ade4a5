"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_todo_service() : crée un TodoService à partir d’une session DB.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()), et à remplacer dans les tests
(app.dependency_overrides[get_session]).
"""

from fastapi import Depends
from sqlmodel import Session

from app.db.session import get_session

from app.db.repositories.todos import TodoRepository, TodoTagRepository
from app.features.todos.services import TodoService

from app.db.repositories.users import UserRepository
from app.features.users.services import UserService

from app.db.repositories.notes import NoteRepository, NoteTagRepository
from app.features.notes.services import NoteService


# -----------------------------
# Todos
# -----------------------------
def get_todo_service(session: Session = Depends(get_session)) -> TodoService:
    return TodoService(repo=TodoRepository(session), tag_repo=TodoTagRepository(session))


# -----------------------------
# Users
# -----------------------------
def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(UserRepository(session))


# -----------------------------
# Notes
# -----------------------------
def get_note_service(session: Session = Depends(get_session)) -> NoteService:
    return NoteService(repo=NoteRepository(session), tag_repo=NoteTagRepository(session))
