from app.core.exceptions import AlreadyExistsError, NotFoundError


class ProductNotFound(NotFoundError):
    default_message = "product not found"


class ProductCodeExists(AlreadyExistsError):
    default_message = "product_code already exists"
