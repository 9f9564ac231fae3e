from .entity_spec import DeleteGuard, EntitySpec, ForeignKey, Operation

__all__ = [
    "DeleteGuard",
    "EntitySpec",
    "ForeignKey",
    "Operation",
]
