from .entity_service import EntityService
from .reference_checker import ReferenceChecker, bind_references, iter_references
from .schema_validator import ValidationResult, validate

__all__ = [
    "EntityService",
    "ReferenceChecker",
    "ValidationResult",
    "bind_references",
    "iter_references",
    "validate",
]
