# app/api/errors.py
from fastapi import HTTPException

from app.domain.errors import (
    ConflictError,
    NotFoundError,
    ServiceError,
    StorageError,
    ValidationError,
)

_STATUS_CODES = {
    NotFoundError: 404,
    ValidationError: 400,
    ConflictError: 409,
    StorageError: 500,
}


def to_http(e: ServiceError) -> HTTPException:
    """Mapowanie wyjatkow serwisow na odpowiedzi HTTP."""
    for exc_type, status_code in _STATUS_CODES.items():
        if isinstance(e, exc_type):
            if status_code == 500:
                #szczegoly bledu bazy tylko w logach
                return HTTPException(status_code=500, detail="Internal server error")
            return HTTPException(status_code=status_code, detail=str(e))
    return HTTPException(status_code=500, detail="Internal server error")
