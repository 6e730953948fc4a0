"""HTTP mapping for atlas failures that Protean's handlers do not cover."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from atlas.errors import MissingLocalization

logger = structlog.get_logger(__name__)


async def missing_localization_handler(request: Request, exc: MissingLocalization):
    logger.error("missing_localization", field=exc.field, language=exc.language, path=request.url.path)
    return JSONResponse(status_code=500, content={"message": "Something went wrong, try again"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MissingLocalization, missing_localization_handler)
