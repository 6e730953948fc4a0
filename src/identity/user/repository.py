"""Repository for the User aggregate."""

from identity.domain import identity
from identity.user.user import User


@identity.repository(part_of=User)
class UserRepository:
    def find_by_login(self, login: str) -> User | None:
        users = self._dao.query.filter(login=login).all().items
        return users[0] if users else None
