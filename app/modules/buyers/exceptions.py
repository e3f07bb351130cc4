from app.core.exceptions import AlreadyExistsError, NotFoundError


class BuyerNotFound(NotFoundError):
    default_message = "buyer not found"


class BuyerAlreadyExists(AlreadyExistsError):
    default_message = "buyer already exists"
