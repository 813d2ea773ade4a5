import logging
from contextlib import contextmanager
from typing import Any, Generic, Iterator, Optional, Sequence, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, Session, select

from app.core.errors import StoreFailure, ValidationFailure

logger = logging.getLogger(__name__)

# Plus grand identifiant qu'une colonne INTEGER (32 bits côté Postgres) peut contenir
MAX_ID = 2**31 - 1


def id_in_range(id_: Any) -> bool:
    return isinstance(id_, int) and 1 <= id_ <= MAX_ID


# Type générique pour le modèle (Todo, TodoTag, Note, etc.)
ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, read, update, delete, list.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    👉 Toute erreur SQLAlchemy ressort en StoreFailure (ValidationFailure pour les contraintes).
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def store_errors(self) -> Iterator[None]:
        """Traduit les erreurs SQLAlchemy et remet la session dans un état propre."""
        try:
            yield
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning("constraint violation on %s: %s", self.model.__name__, exc.orig)
            raise ValidationFailure(f"{self.model.__name__} violates a store constraint", cause=exc) from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreFailure(f"{self.model.__name__} store operation failed", cause=exc) from exc
        except OverflowError as exc:
            # levée par le driver (sqlite3) avant SQLAlchemy, donc jamais enveloppée par lui
            self.session.rollback()
            raise StoreFailure(f"{self.model.__name__} value out of store range", cause=exc) from exc

    # ---------- READ ----------

    def list(self) -> Sequence[ModelT]:
        """Retourne tous les enregistrements."""
        with self.store_errors():
            return self.session.exec(select(self.model)).all()

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        if not id_in_range(id_):
            return None
        with self.store_errors():
            return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        """Crée et persiste un nouvel enregistrement (id et valeurs par défaut rechargés)."""
        entity = self.model(**fields)
        with self.store_errors():
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
        return entity

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, **changes) -> ModelT:
        """Met à jour un enregistrement existant avec les seuls champs fournis."""
        for key, value in changes.items():
            setattr(entity, key, value)
        with self.store_errors():
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
        return entity

    # ---------- DELETE ----------

    def delete(self, entity: ModelT) -> None:
        """Supprime un enregistrement."""
        with self.store_errors():
            self.session.delete(entity)
            self.session.commit()
