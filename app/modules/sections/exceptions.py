from app.core.exceptions import AlreadyExistsError, NotFoundError


class SectionNotFound(NotFoundError):
    default_message = "section not found"


class DuplicateSectionNumber(AlreadyExistsError):
    default_message = "duplicate section number"
