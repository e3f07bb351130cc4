from app.core.exceptions import NotFoundError


class ProductNotFound(NotFoundError):
    """El producto del registro no existe"""
    default_message = "product not found"
