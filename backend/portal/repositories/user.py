"""User repository for database operations."""

from portal.db.models import User
from portal.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity operations."""

    def __init__(self):
        super().__init__(User)


user_repository = UserRepository()
