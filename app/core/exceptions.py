"""
Custom application exceptions.
"""

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class AppException(HTTPException):
    """Base application exception."""
    
    def __init__(self, detail: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(status_code=status_code, detail=detail)


class NotFoundException(AppException):
    """Resource not found exception."""
    
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(detail=detail, status_code=status.HTTP_404_NOT_FOUND)


class UnauthorizedException(AppException):
    """Unauthorized access exception."""
    
    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(detail=detail, status_code=status.HTTP_401_UNAUTHORIZED)
        self.headers = {"WWW-Authenticate": "Bearer"}


class BadRequestException(AppException):
    """Bad request exception."""
    
    def __init__(self, detail: str = "Bad request"):
        super().__init__(detail=detail, status_code=status.HTTP_400_BAD_REQUEST)


class UpstreamException(AppException):
    """A third-party data provider failed."""
    
    def __init__(self, detail: str = "Upstream service unavailable"):
        super().__init__(detail=detail, status_code=status.HTTP_502_BAD_GATEWAY)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    422 with type, location and message for each error.
    
    The rejected input and error context are left out: they can hold values
    JSON cannot carry (NaN, Infinity, exception objects).
    """
    errors = [
        {
            "type": error.get("type"),
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg"),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": errors},
    )
