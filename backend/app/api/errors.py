from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backend.app.api.schemas import ErrorResponse
from contentgraph.graph.errors import (
    GraphRegistryError,
    InvalidArgumentError,
    DuplicateIdError,
    NotFoundError,
    UnauthorizedError,
    IndexOutOfRangeError,
)

STATUS_BY_ERROR = {
    InvalidArgumentError: 422,
    DuplicateIdError: 409,
    NotFoundError: 404,
    UnauthorizedError: 403,
    IndexOutOfRangeError: 400,
}


def status_for(exc: GraphRegistryError) -> int:
    for error_type, status in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status
    return 400


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(GraphRegistryError)
    async def _registry_error(_: Request, exc: GraphRegistryError) -> JSONResponse:
        body = ErrorResponse(
            error=type(exc).__name__,
            detail=str(exc),
            side=getattr(exc, "side", None),
        )
        return JSONResponse(
            status_code=status_for(exc),
            content=body.model_dump(exclude_none=True),
        )
