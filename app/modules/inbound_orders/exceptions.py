from app.core.exceptions import AlreadyExistsError, NotFoundError, ReferenceNotFoundError


class EmployeeNotFound(NotFoundError):
    default_message = "employee not found"


class EmployeeDoesNotExist(ReferenceNotFoundError):
    default_message = "Employee does not exists"


class WarehouseDoesNotExist(ReferenceNotFoundError):
    default_message = "Warehouse does not exists"


class InboundOrderAlreadyExists(AlreadyExistsError):
    default_message = "duplicate inbound order number"
