from typing import Optional

from sqlmodel import SQLModel


class UserCreate(SQLModel):
    name: Optional[str] = None
    email: Optional[str] = None


class UserOut(SQLModel):
    id: int
    name: str
    email: str
