from app.core.exceptions import AlreadyExistsError, NotFoundError


class LocalityNotFound(NotFoundError):
    default_message = "locality not found"


class LocalityAlreadyExists(AlreadyExistsError):
    default_message = "locality already exists"


class NoRows(NotFoundError):
    """La consulta no devolvió filas"""
    default_message = "no rows in result set"
