"""
Shared dependencies for API routes.

``get_registry`` returns the registry attached to the application at
start-up.  ``unwrap`` turns an operation result into the response
value or an ``HTTPException`` with a status derived from the error
kind.  ``request_validation_handler`` gives requests that FastAPI
rejects before reaching an operation the same 400 ``InvalidInput``
body that operations produce.
"""

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from service_hub_api.app.core.errors import ErrorKind
from service_hub_api.app.core.result import Err, Result, T
from service_hub_api.app.registry import Registry


STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.SERVICE_MISSING: status.HTTP_404_NOT_FOUND,
    ErrorKind.NO_REVIEWS: status.HTTP_404_NOT_FOUND,
}

INVALID_REQUEST = "Invalid request data"


def get_registry(request: Request) -> Registry:
    return request.app.state.registry


def unwrap(result: Result[T]) -> T:
    if isinstance(result, Err):
        raise HTTPException(
            status_code=STATUS_BY_KIND[result.kind],
            detail={"kind": result.kind.value, "message": result.message},
        )
    return result.value


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": {
                "kind": ErrorKind.INVALID_INPUT.value,
                "message": f"{INVALID_REQUEST}: {fields}" if fields else INVALID_REQUEST,
            }
        },
    )
