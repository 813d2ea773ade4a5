import logging
from typing import Optional

from app.db.models.users import User
from app.db.repositories.users import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def get(self, user_id: int) -> Optional[User]:
        return self.repo.get(user_id)

    def create(self, name: Optional[str], email: Optional[str]) -> User:
        # l'unicité de l'email est portée par la contrainte UNIQUE de la table
        user = self.repo.create(name=name, email=email)
        logger.info("user created id=%s", user.id)
        return user

    def get_by_email(self, email: str) -> Optional[User]:
        return self.repo.get_by_email(email)
