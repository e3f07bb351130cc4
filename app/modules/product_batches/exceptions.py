from app.core.exceptions import AlreadyExistsError, ReferenceNotFoundError


class DuplicateBatchNumber(AlreadyExistsError):
    default_message = "batch number must be unique, provided already exists"


class ProductNotFound(ReferenceNotFoundError):
    default_message = "can't create batch, provided product id was not found"


class SectionNotFound(ReferenceNotFoundError):
    default_message = "can't create batch, provided section id was not found"
