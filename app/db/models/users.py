"""
➡️ But : Définir la structure des tables de la base (ORM).

Représente les objets persistés. Ici on représente les propriétaires des notes.
"""

from sqlmodel import Field

from .base import BaseModelDB


class User(BaseModelDB, table=True):
    __tablename__ = "users"

    name: str = Field(max_length=255)
    email: str = Field(max_length=255, index=True, unique=True)
