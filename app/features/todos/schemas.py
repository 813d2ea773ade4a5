"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

Contient les modèles Pydantic utilisés par FastAPI :

TodoCreate → corps de requête POST

TodoUpdate → corps PUT/PATCH (patch partiel : seuls les champs envoyés sont écrits)

TodoOut → réponse de l’API (avec ses tags)

Pas de validation au-delà de la conversion de type : un titre absent arrive jusqu'à la base,
dont la contrainte NOT NULL est le seul contrôle.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class TodoCreate(BaseModel):
    title: Optional[str] = Field(None, examples=["Acheter du lait"])
    description: Optional[str] = Field(None, examples=["Demi-écrémé, 2 litres"])


class TodoUpdate(BaseModel):
    title: Optional[str] = Field(None, examples=["Aller courir"])
    description: Optional[str] = Field(None, examples=["5 km autour du parc"])
    completed: Optional[bool] = Field(None, examples=[True])


class TagCreate(BaseModel):
    tag: Optional[str] = Field(None, examples=["courses"])


class TodoTagOut(BaseModel):
    id: int
    todo_id: int
    tag: str

    model_config = {"from_attributes": True}


class TodoOut(BaseModel):
    id: int
    title: str
    description: str
    completed: bool
    created_at: datetime
    tags: List[TodoTagOut] = []

    model_config = {"from_attributes": True}
