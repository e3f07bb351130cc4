from app.core.exceptions import AlreadyExistsError, InvalidDataError, ReferenceNotFoundError


class IncorrectCarryData(InvalidDataError):
    default_message = "incorrect data"


class CarryAlreadyExists(AlreadyExistsError):
    default_message = "carry already exists"


class LocalityCarriesNotFound(ReferenceNotFoundError):
    default_message = "locality carries not found"
