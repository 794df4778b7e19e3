"""Domain-specific exceptions — framework-independent."""


class SlyError(Exception):
    """Base class for every error raised by the content core."""


class EntityNotFoundError(SlyError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(SlyError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class MalformedPathError(SlyError):
    """Raised when a request path cannot be turned into a resource id."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path!r}: {reason}")


class MalformedInputError(SlyError):
    """Raised when a submitted document cannot be accepted."""


class InvalidKeyError(SlyError):
    """Raised when a string is not a valid 14-digit article key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"'{key}' is not a valid article key")


class StorageError(SlyError):
    """Raised when the storage backend fails (connection or query error)."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        message = f"storage failure during {operation}"
        if cause is not None:
            message += f": {type(cause).__name__}: {cause}"
        super().__init__(message)


class RenderError(SlyError):
    """Raised when a page template fails while rendering."""


class UnsupportedMethodError(SlyError):
    """Raised when a request method has no handler for the resource."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"method {method} not supported")
