"""Database schema management for the relational providers.

Both domains persist through Protean's SQLAlchemy provider outside tests. Tables
are created explicitly with ``setup_db`` (see ``manage.py``); the provider does
not create them on first use.
"""

import os

import structlog
from protean.domain import Domain
from sqlalchemy import create_engine

logger = structlog.get_logger(__name__)

RELATIONAL_PROVIDERS = ("sqlite", "postgresql")


def apply_database_url(domain: Domain) -> None:
    """Point the default database at ``DATABASE_URL`` when it is set."""
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        domain.config["databases"]["default"]["database_uri"] = database_url


def _relational_providers(domain: Domain):
    for _, provider in domain.providers.items():
        if provider.conn_info["provider"] in RELATIONAL_PROVIDERS:
            yield provider


def _register_models(domain: Domain, provider) -> None:
    # Touching the repository's DAO registers the element's table with the
    # provider's metadata.
    records = list(domain.registry.aggregates.items()) + list(domain.registry.entities.items())
    for _, record in records:
        if record.cls.meta_.provider == provider.name:
            domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> None:
    """Create the tables of every aggregate and entity stored in a relational database."""
    with domain.domain_context():
        for provider in _relational_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            _register_models(domain, provider)
            provider._metadata.create_all(engine)
            logger.info("schema_created", domain=domain.name, provider=provider.name)


def drop_db(domain: Domain) -> None:
    with domain.domain_context():
        for provider in _relational_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)
            logger.info("schema_dropped", domain=domain.name, provider=provider.name)
