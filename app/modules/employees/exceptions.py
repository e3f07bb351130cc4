from app.core.exceptions import AlreadyExistsError, NotFoundError


class EmployeeNotFound(NotFoundError):
    default_message = "employee not found"


class EmployeeAlreadyExists(AlreadyExistsError):
    default_message = "employee already exists"
