"""
Content Store Abstract Interface

Persistence contract the content manager is written against. Any backend
(Tortoise ORM tables, an in-process dict, a hosted database client) can sit
behind it without the publishing rules changing.
"""
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple


class ContentKind(str, Enum):
    """Content type discriminator. Slug uniqueness holds within one kind."""
    POST = "post"
    ARTICLE = "article"

    @property
    def label(self) -> str:
        return "Post" if self is ContentKind.POST else "Article"

    @property
    def ordering(self) -> Tuple[str, ...]:
        """Listing order: newest posts first, articles by (category, title)."""
        if self is ContentKind.POST:
            return ("-created_at",)
        return ("category", "title")


@dataclass
class ContentItem:
    """
    A post or article as the content layer sees it, independent of backend.

    Note: `excerpt` is only set for posts and `category` only for articles.
    """
    id: str
    kind: ContentKind
    title: str
    slug: str
    content: str
    author_id: str
    tags: List[str] = field(default_factory=list)
    published: bool = False
    excerpt: Optional[str] = None
    category: Optional[str] = None
    author_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __repr__(self):
        state = "published" if self.published else "draft"
        return f"ContentItem(kind={self.kind.value}, slug='{self.slug}', {state})"


def looks_like_uuid(value: str) -> bool:
    """Default id predicate: both shipped stores hand out UUIDs."""
    try:
        uuid.UUID(str(value))
    except (TypeError, ValueError):
        return False
    return True


class ContentStore(ABC):
    """Content Store Abstract Base Class"""

    @abstractmethod
    async def find_by_slug(
        self,
        kind: ContentKind,
        slug: str,
        exclude_id: Optional[str] = None,
    ) -> Optional[ContentItem]:
        """
        Find the item of `kind` owning `slug`

        Parameters:
        - exclude_id: ignore this item (used when re-checking a renamed item)
        """
        pass

    @abstractmethod
    async def find_by_id(self, kind: ContentKind, item_id: str) -> Optional[ContentItem]:
        pass

    @abstractmethod
    async def list_sorted(
        self,
        kind: ContentKind,
        published_only: bool = False,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[ContentItem]:
        """List items of `kind` in `kind.ordering`, optionally published ones only"""
        pass

    @abstractmethod
    async def insert(self, kind: ContentKind, values: Dict) -> ContentItem:
        """
        Insert a new item and return it with id and timestamps assigned

        Raises:
        - ConflictError: slug already taken for this kind
        """
        pass

    @abstractmethod
    async def update(self, kind: ContentKind, item_id: str, changes: Dict) -> Optional[ContentItem]:
        """
        Apply `changes` and refresh updated_at; None if the item is gone

        Raises:
        - ConflictError: new slug already taken for this kind
        """
        pass

    @abstractmethod
    async def delete(self, kind: ContentKind, item_id: str) -> bool:
        """Permanently remove an item. Returns False if nothing was deleted."""
        pass

    @abstractmethod
    async def count(self, kind: ContentKind, published: Optional[bool] = None) -> int:
        pass

    @abstractmethod
    async def group_count(
        self,
        kind: ContentKind,
        field_name: str,
        published_only: bool = True,
    ) -> List[Tuple[str, int]]:
        """Count items grouped by exact value of `field_name`, sorted by value"""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Store name (e.g., "Tortoise ORM")"""
        pass
