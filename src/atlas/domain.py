"""Atlas bounded context: countries, their sights and per-user sight ratings.

Country is the only aggregate: sights and their ratings are embedded in it and
change only through it.
"""

from protean.domain import Domain

from shared.db import apply_database_url
from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
atlas = Domain(name="atlas")
apply_database_url(atlas)
