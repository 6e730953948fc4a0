"""User registration: command, handler and the entry point used by the API.

The command carries the password hash only; the plain password is checked
against the policy and hashed before the command is built.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from identity.domain import identity, logger
from identity.user.user import User, check_password_policy
from shared.security import hash_password


@identity.command(part_of="User")
class RegisterUser:
    """Create a user account."""

    login: String(required=True, max_length=64)
    password_hash: String(required=True, max_length=255)
    display_name: String(required=True, max_length=100)
    photo_url: String(max_length=500)


@identity.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_login(command.login) is not None:
            raise ValidationError({"login": ["User with this login already exists"]})

        user = User.register(
            login=command.login,
            password_hash=command.password_hash,
            display_name=command.display_name,
            photo_url=command.photo_url,
        )
        repo.add(user)
        logger.info("user_registered", user_id=str(user.id), login=user.login)
        return str(user.id)


def register_user(login, password, display_name, photo_url=None):
    """Register a user from a plain password and return the new user id."""
    check_password_policy(password)
    command = RegisterUser(
        login=login,
        password_hash=hash_password(password),
        display_name=display_name,
        photo_url=photo_url,
    )
    return current_domain.process(command, asynchronous=False)
