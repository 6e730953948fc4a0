"""Identity bounded context: user accounts, registration and login."""

from protean.domain import Domain

from shared.db import apply_database_url
from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
identity = Domain(name="identity")
apply_database_url(identity)
