"""Login: exchanging a login and password for a bearer token."""

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from identity.domain import logger
from identity.user.user import User
from shared.security import create_access_token


def authenticate(login, password):
    """Verify credentials and issue a token.

    Returns a mapping with ``token``, ``user_id`` and ``name``.
    """
    user = current_domain.repository_for(User).find_by_login(login)
    if user is None:
        logger.info("login_failed", login=login, reason="unknown_login")
        raise ValidationError({"login": ["User not found"]})

    if not user.check_password(password):
        logger.info("login_failed", login=login, reason="wrong_password")
        raise ValidationError({"password": ["Wrong password, try again"]})

    logger.info("user_logged_in", user_id=str(user.id))
    return {
        "token": create_access_token(str(user.id)),
        "user_id": str(user.id),
        "name": user.display_name,
    }
