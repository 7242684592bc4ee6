"""
Content Store Factory

Chooses the ContentStore from CONTENT_BACKEND and builds the ContentManager
route handlers use.
"""
import logging
from typing import Optional

from app.config import settings
from .content import ContentManager
from .store_base import ContentStore
from .store_memory import MemoryContentStore
from .store_tortoise import TortoiseContentStore

logger = logging.getLogger("uvicorn.error")

_stores: dict[str, ContentStore] = {}


def get_content_store(backend: Optional[str] = None) -> ContentStore:
    """
    Get the content store for `backend` (defaults to settings.content_backend)

    Stores are created once per process; the memory store therefore keeps its
    data across requests.

    Raises:
    - RuntimeError: unknown backend name
    """
    backend = (backend or settings.content_backend).lower()
    if backend not in _stores:
        if backend == "tortoise":
            _stores[backend] = TortoiseContentStore()
        elif backend == "memory":
            _stores[backend] = MemoryContentStore()
        else:
            raise RuntimeError(
                f"Unknown CONTENT_BACKEND '{backend}'. Use 'tortoise' or 'memory'."
            )
        logger.info("[content] Using %s store", _stores[backend].name)
    return _stores[backend]


def get_content_manager() -> ContentManager:
    """FastAPI dependency: a ContentManager over the configured store."""
    return ContentManager(get_content_store())


def reset_content_stores() -> None:
    """Forget cached stores (tests switch backends between cases)."""
    _stores.clear()
