"""Domain-specific exceptions — framework-independent."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single violated rule: dotted field path plus a readable message."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}" if self.field else self.message


class InvalidIdentifierError(Exception):
    """Raised when a path identifier is not a well-formed document id."""

    def __init__(self, entity_type: str, raw: str):
        self.entity_type = entity_type
        self.raw = raw
        super().__init__(f"Invalid {entity_type} ID format")


class SchemaValidationError(Exception):
    """Raised when a payload violates one or more field rules."""

    def __init__(self, entity_type: str, errors: list[FieldError]):
        self.entity_type = entity_type
        self.errors = errors
        super().__init__("Validation failed")


class MissingReferenceError(Exception):
    """Raised when a foreign-key field does not resolve to an existing document."""

    def __init__(self, field: str, collection: str, entity_id: str):
        self.field = field
        self.collection = collection
        self.entity_id = entity_id
        super().__init__(
            f"{field} does not reference an existing document in '{collection}'"
        )


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class DependentsExistError(Exception):
    """Raised when a delete is blocked because other documents reference the entity."""

    def __init__(self, entity_type: str, dependent_label: str, count: int, dependent_item: str = ""):
        self.entity_type = entity_type
        self.dependent_label = dependent_label
        self.count = count
        item = dependent_item or dependent_label
        self.details = (
            f"{entity_type[:1].upper()}{entity_type[1:]} has {count} {item}(s). "
            f"Delete {dependent_label} first."
        )
        super().__init__(f"Cannot delete {entity_type} with existing {dependent_label}")


class StoreUnavailableError(Exception):
    """Raised when the document store is not connected or unreachable."""

    def __init__(self, reason: str = "Database not initialized"):
        self.reason = reason
        super().__init__(reason)
