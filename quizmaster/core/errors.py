"""Application error taxonomy and the handlers that render it.

Every error reaches the client with the same body shape::

    {"detail": {"error": "NotFound", "message": "...", "details": [...]}}
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class QuizError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "InternalError"
    default_message: str = "Erreur serveur"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[List[Dict[str, str]]] = None,
        field: Optional[str] = None,
    ):
        self.message = message or self.default_message
        if details is None and field is not None:
            details = [{"field": field, "message": self.message}]
        self.details = details or []
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(QuizError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "ValidationError"
    default_message = "Données invalides"


class Unauthenticated(QuizError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Unauthenticated"
    default_message = "Non autorisé"


class Forbidden(QuizError):
    status_code = status.HTTP_403_FORBIDDEN
    error = "Forbidden"
    default_message = "Accès refusé - Admin requis"


class NotFound(QuizError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "NotFound"
    default_message = "Ressource non trouvée"


class InternalError(QuizError):
    pass


async def quiz_error_handler(request: Request, exc: QuizError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_dict()})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for err in exc.errors():
        # loc is ("body", "themeId") or ("path", "theme_id"); drop the location prefix
        loc = [str(part) for part in err.get("loc", ())[1:]]
        details.append({"field": ".".join(loc), "message": err.get("msg", "")})
    error = ValidationError(details=details)
    return JSONResponse(status_code=error.status_code, content={"detail": error.to_dict()})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.to_dict()})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QuizError, quiz_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
