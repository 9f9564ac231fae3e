"""Abstract document store interface (port) — hands out per-collection repositories."""

from abc import ABC, abstractmethod

from .entity_repository import EntityRepository


class DocumentStore(ABC):
    """Port for the process-wide store handle."""

    @abstractmethod
    def repository(self, collection: str) -> EntityRepository:
        """Return a repository bound to ``collection``.

        Raises StoreUnavailableError when the store has not been connected.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """Check store connectivity (for readiness probes)."""
        ...
