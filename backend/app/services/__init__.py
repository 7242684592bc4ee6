"""
Services Module

Content publishing and its collaborators:
- Slug derivation
- ContentManager (publishing rules for posts and wiki articles)
- Content stores: Tortoise ORM and in-memory
- Markdown rendering
"""

from .slug import derive_slug
from .store_base import (
    ContentItem,
    ContentKind,
    ContentStore,
    looks_like_uuid,
)
from .content import (
    ContentManager,
    make_excerpt,
    normalize_tags,
)
from .store_memory import MemoryContentStore
from .store_tortoise import TortoiseContentStore
from .store_factory import (
    get_content_manager,
    get_content_store,
)
from .markdown_renderer import MarkdownRenderer, markdown_renderer

__all__ = [
    "derive_slug",
    "ContentItem",
    "ContentKind",
    "ContentStore",
    "looks_like_uuid",
    "ContentManager",
    "make_excerpt",
    "normalize_tags",
    "MemoryContentStore",
    "TortoiseContentStore",
    "get_content_manager",
    "get_content_store",
    "MarkdownRenderer",
    "markdown_renderer",
]
