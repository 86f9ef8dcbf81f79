"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from bins.application.common.exceptions.base import ApplicationError
from bins.application.common.exceptions.query import (
    NearbyProcedureUnavailableError,
    QueryFailedError,
)
from bins.application.common.exceptions.validation import (
    InvalidBinTypeError,
    InvalidLocationTypeError,
    RateLimitExceededError,
)
from bins.domain.exceptions.base import DomainError
from bins.domain.exceptions.geo import InvalidBoundingBoxError, InvalidCoordinatesError


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(QueryFailedError)
    async def query_failed_handler(request: Request, exc: QueryFailedError):
        return JSONResponse(
            status_code=500,
            content={"detail": exc.message, "code": "DATABASE_QUERY_FAILED"},
        )

    @app.exception_handler(NearbyProcedureUnavailableError)
    async def nearby_procedure_unavailable_handler(
        request: Request, exc: NearbyProcedureUnavailableError
    ):
        return JSONResponse(
            status_code=503,
            content={"detail": exc.message, "code": "NEARBY_PROCEDURE_UNAVAILABLE"},
        )

    @app.exception_handler(RateLimitExceededError)
    async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceededError):
        return JSONResponse(
            status_code=429,
            content={"detail": exc.message, "code": "RATE_LIMIT_EXCEEDED"},
            headers={"Retry-After": str(exc.retry_after)},
        )

    @app.exception_handler(InvalidBinTypeError)
    async def invalid_bin_type_handler(request: Request, exc: InvalidBinTypeError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_BIN_TYPE"},
        )

    @app.exception_handler(InvalidLocationTypeError)
    async def invalid_location_type_handler(request: Request, exc: InvalidLocationTypeError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_LOCATION_TYPE"},
        )

    @app.exception_handler(InvalidBoundingBoxError)
    async def invalid_bounding_box_handler(request: Request, exc: InvalidBoundingBoxError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_BOUNDING_BOX"},
        )

    @app.exception_handler(InvalidCoordinatesError)
    async def invalid_coordinates_handler(request: Request, exc: InvalidCoordinatesError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_COORDINATES"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
