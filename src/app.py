"""Travel guide FastAPI application.

Serves the Identity (/auth) and Atlas (/countries) domains. Each request is
wrapped in the correct domain context based on URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000 --reload

Set ATLAS_SEED_FILE to a JSON file of countries to populate an empty catalogue on start.
Create the tables first with ``python src/manage.py setup-db``.
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV selects the config overlay from each domain.toml.
import os

from atlas.domain import atlas  # noqa: E402
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from identity.domain import identity  # noqa: E402
from protean.integrations.fastapi import register_exception_handlers
from shared.logging import add_context, clear_context
from shared.uploads import uploads_dir

identity.init()
atlas.init()

if os.getenv("ATLAS_SEED_FILE"):
    from atlas.seed import seed_if_empty

    with atlas.domain_context():
        seed_if_empty(os.getenv("ATLAS_SEED_FILE"))

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/auth": identity,
    "/countries": atlas,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Travel Guide API",
    description="Countries, sights and ratings for the travel guide app",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        add_context(domain=domain.name, path=request.url.path)
        try:
            with domain.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        return response
    # Health check, docs and uploads run outside any domain
    return await call_next(request)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from atlas.api import country_router, register_error_handlers  # noqa: E402
from identity.api import router as identity_router  # noqa: E402

app.include_router(identity_router)
app.include_router(country_router)
register_error_handlers(app)

app.mount("/uploads", StaticFiles(directory=uploads_dir()), name="uploads")


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "identity": {"name": identity.name},
                "atlas": {"name": atlas.name},
            },
        }
    )
