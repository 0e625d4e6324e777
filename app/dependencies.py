# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.store import Store


def get_store(request: Request) -> Store:
    """
    Get the store created at startup.

    Tests swap in their own store via app.dependency_overrides[get_store].
    """
    return request.app.state.store


# Type alias for dependency injection
StoreDep = Annotated[Store, Depends(get_store)]
