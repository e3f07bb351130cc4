"""
Errores de dominio y respuestas de error HTTP.

Los servicios lanzan excepciones de dominio (sentinelas por entidad) y los
routers las traducen a HTTPException con uno de los tres sobres de error que
expone la API:

- {"message": "..."}                 -> message_error
- {"error": "..."}                   -> error_body
- {"code": "...", "message": "..."}  -> web_error
"""

from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse

# ===== ERRORES DE DOMINIO =====

class DomainError(Exception):
    """Base de todos los errores sentinela de los servicios"""
    default_message = "domain error"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class NotFoundError(DomainError):
    default_message = "not found"


class AlreadyExistsError(DomainError):
    default_message = "already exists"


class ReferenceNotFoundError(DomainError):
    """Una entidad referenciada (llave foránea) no existe"""
    default_message = "referenced entity not found"


class InvalidDataError(DomainError):
    default_message = "incorrect data"


# ===== SOBRES DE ERROR =====

# Textos fijos; la frase de 422 cambia entre versiones de Python
STATUS_CODE_TEXTS = {
    400: "bad_request",
    404: "not_found",
    409: "conflict",
    422: "unprocessable_entity",
    500: "internal_server_error",
}


def status_code_text(status_code: int) -> str:
    """Texto del estado HTTP en snake case: 404 -> 'not_found'"""
    if status_code in STATUS_CODE_TEXTS:
        return STATUS_CODE_TEXTS[status_code]
    return HTTPStatus(status_code).phrase.lower().replace(" ", "_").replace("-", "_")


def message_error(status_code: int, message: str) -> HTTPException:
    return HTTPException(status_code=status_code, detail={"message": message})


def error_body(status_code: int, message: str) -> HTTPException:
    return HTTPException(status_code=status_code, detail={"error": message})


def web_error(status_code: int, message: str) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={"code": status_code_text(status_code), "message": message}
    )


def setup_exception_handlers(app: FastAPI):
    """Registrar el handler que serializa los sobres tal cual"""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        detail: Any = exc.detail
        if isinstance(detail, dict):
            return JSONResponse(status_code=exc.status_code, content=detail, headers=exc.headers)
        return PlainTextResponse(str(detail), status_code=exc.status_code, headers=exc.headers)
