from app.core.exceptions import AlreadyExistsError, InvalidDataError, NotFoundError


class WarehouseNotFound(NotFoundError):
    default_message = "warehouse not found"


class IncorrectWarehouseData(InvalidDataError):
    default_message = "incorrect data"


class WarehouseAlreadyExists(AlreadyExistsError):
    default_message = "warehouse already exists"
