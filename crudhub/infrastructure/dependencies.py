"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator, Callable

from fastapi import Depends, HTTPException, Request, status

from crudhub.application.interfaces import DocumentStore
from crudhub.application.services import EntityService
from crudhub.config import get_settings
from crudhub.domain.entities import EntitySpec
from crudhub.domain.exceptions import StoreUnavailableError


def get_document_store(request: Request) -> DocumentStore:
    """Returns the process-wide store opened in the lifespan."""
    store: DocumentStore | None = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreUnavailableError("Database not initialized")
    return store


def entity_service_dependency(
    entity: EntitySpec,
) -> Callable[..., AsyncGenerator[EntityService, None]]:
    """Builds a dependency that provides an EntityService bound to ``entity``."""

    async def get_entity_service(
        store: DocumentStore = Depends(get_document_store),
    ) -> AsyncGenerator[EntityService, None]:
        yield EntityService(entity, store)

    get_entity_service.__name__ = f"get_{entity.collection}_service"
    return get_entity_service


def get_current_user(request: Request) -> dict | None:
    """The session principal stored by the login flow, if any."""
    return request.session.get("user")


def require_authenticated(user: dict | None = Depends(get_current_user)) -> dict | None:
    """Rejects the request with 401 when sessions are enforced and nobody is logged in."""
    if get_settings().auth_enabled and not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required. Please log in first.",
        )
    return user
