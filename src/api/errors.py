"""App-wide exception handlers.

Expected domain failures (conflict, bad credentials, not found) are mapped
to HTTPException inside each route. Only infrastructure failures reach
these handlers, and they get a generic body.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from domain.model.errors import RepositoryError

logger = logging.getLogger(__name__)


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    logger.error("Persistence failure", extra={"path": request.url.path, "error": str(exc)})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Database service unavailable"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RepositoryError, repository_error_handler)
