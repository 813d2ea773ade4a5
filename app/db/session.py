"""
➡️ But : Configurer la base et gérer les sessions de base de données.

engine : connexion à la base (SQLite par défaut, Postgres si DATABASE_URL / DATABASE_USER).

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Réutilisable par injection (Depends(get_session)).
"""

from typing import Dict, Any, Iterator, Optional
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy import event
from sqlalchemy.engine import Engine

# Import all models for creating all tables
from app.db.models.todos import Todo, TodoTag  # noqa: F401
from app.db.models.users import User  # noqa: F401
from app.db.models.notes import Note, NoteTag  # noqa: F401

from app.core.config import settings


def _register_unicode_lower(dbapi_conn, _record) -> None:
    # le lower() natif de SQLite ne replie que l'ASCII : ILIKE doit aussi marcher sur "Éclair"
    dbapi_conn.create_function("lower", 1, lambda s: s.lower() if isinstance(s, str) else s, deterministic=True)


def build_engine(url: Optional[str] = None, *, echo: Optional[bool] = None, **kwargs: Any) -> Engine:
    url = url or settings.DATABASE_URL
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")

    connect_args: Dict[str, Any] = kwargs.pop("connect_args", {})
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args.setdefault("check_same_thread", False)

    # echo seulement en dev pour ne pas polluer les logs en prod
    engine = create_engine(
        url,
        echo=(settings.ENV == "dev") if echo is None else echo,
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
        **kwargs,
    )

    if is_sqlite:
        event.listen(engine, "connect", _register_unicode_lower)
    return engine


engine: Engine = build_engine()


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    En prod avec des migrations, préfère-les à create_all.
    """
    SQLModel.metadata.create_all(bind or engine)


def get_session() -> Iterator[Session]:
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
