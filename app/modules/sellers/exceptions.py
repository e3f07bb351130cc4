from app.core.exceptions import AlreadyExistsError, NotFoundError


class SellerNotFound(NotFoundError):
    default_message = "seller not found"


class SellerAlreadyExists(AlreadyExistsError):
    default_message = "seller already exists"
