"""User aggregate root and the password policy applied at registration."""

import re
from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from identity.domain import identity
from shared.security import verify_password

_ALLOWED = re.compile(r"^[A-Za-z0-9_]+$")

MIN_PASSWORD_LENGTH = 6


def check_password_policy(password):
    """Reject passwords the platform does not accept.

    Runs on the plain password before hashing, so it lives outside the aggregate.
    """
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError({"password": [f"Minimal password length is {MIN_PASSWORD_LENGTH} symbols"]})
    if not _ALLOWED.match(password):
        raise ValidationError({"password": ['Only latin letters, numbers and "_" sign can be present in password']})


@identity.aggregate
class User:
    """A registered traveller who can sign in and rate sights."""

    login: String(required=True, max_length=64, unique=True)
    password_hash: String(required=True, max_length=255)
    display_name: String(required=True, max_length=100)
    photo_url: String(max_length=500)
    registered_at: DateTime(default=datetime.now)

    @invariant.post
    def login_must_use_allowed_characters(self):
        if self.login and not _ALLOWED.match(self.login):
            raise ValidationError({"login": ["Only latin letters, numbers and _ sign can be present in login"]})

    @invariant.post
    def display_name_must_not_be_blank(self):
        if self.display_name is not None and not self.display_name.strip():
            raise ValidationError({"display_name": ["Minimal name length is 1 symbol"]})

    @classmethod
    def register(cls, login, password_hash, display_name, photo_url=None):
        from identity.user.events import UserRegistered

        now = datetime.now()
        user = cls(
            login=login,
            password_hash=password_hash,
            display_name=display_name.strip() if display_name else display_name,
            photo_url=photo_url,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                login=user.login,
                display_name=user.display_name,
                registered_at=now,
            )
        )
        return user

    def check_password(self, password):
        return verify_password(password, self.password_hash)
