# biblioteca/errors.py


class LibraryError(Exception):
    """Base class for business rule failures raised by the services."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(LibraryError):
    """A referenced book, category, author or loan does not exist."""

    def __init__(self, entity: str, entity_id=None):
        self.entity = entity
        self.entity_id = entity_id
        message = entity if entity_id is None else f"{entity} {entity_id} not found"
        super().__init__(message)


class InvalidOperationError(LibraryError):
    """The request breaks a lending or catalog rule."""
    pass
