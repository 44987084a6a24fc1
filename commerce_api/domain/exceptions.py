"""Domain-specific exceptions — framework-independent."""


class InvalidArgumentError(Exception):
    """Raised when a required value is missing, empty, or malformed."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str, field: str = "id"):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.field = field
        super().__init__(f"{entity_type} with {field} '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")
