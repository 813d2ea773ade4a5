"""
➡️ But : Formats d’entrée/sortie des notes.

NoteCreate → corps POST /notes
NoteOut    → une note et ses tags
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    user_id: int
    title: Optional[str] = Field(None, examples=["Idées de vacances"])
    content: Optional[str] = Field(None, examples=["Lisbonne, Porto"])


class NoteTagOut(BaseModel):
    id: int
    note_id: int
    tag: str

    model_config = {"from_attributes": True}


class NoteOut(BaseModel):
    id: int
    user_id: int
    title: str
    content: str
    created_at: datetime
    tags: List[NoteTagOut] = []

    model_config = {"from_attributes": True}
