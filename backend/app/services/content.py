"""
Content Identity & Publication Manager

Owns the rules shared by blog posts and wiki articles:
- slug derivation and per-kind uniqueness on create/update
- dual-key (id or slug) addressing
- published/draft visibility for readers vs admins
- category aggregation for the wiki

Persistence is delegated to a ContentStore; the manager never talks to a
database directly, so every backend behaves the same.
"""
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from app.config import settings
from app.core.exceptions import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from app.core.security import Requester, is_admin
from .slug import derive_slug
from .store_base import ContentItem, ContentKind, ContentStore, looks_like_uuid

logger = logging.getLogger("uvicorn.error")


def make_excerpt(content: str, length: Optional[int] = None) -> str:
    """Default post excerpt: the first `length` characters followed by an ellipsis."""
    length = settings.excerpt_length if length is None else length
    return content[:length] + "..."


def normalize_tags(tags: Any) -> List[str]:
    """
    Clean a tag list: strip, drop blanks and repeats, keep first-seen order.
    A comma-separated string is accepted too (what the admin form submits).
    """
    if not tags:
        return []
    if isinstance(tags, str):
        tags = tags.split(",")
    seen = []
    for tag in tags:
        tag = str(tag).strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


def _required_text(fields: Dict[str, Any], name: str, strip: bool = True) -> str:
    value = fields.get(name)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} is required", code="INVALID_INPUT")
    return value.strip() if strip else value


def _require_admin(requester: Optional[Requester]) -> Requester:
    if requester is None:
        raise UnauthorizedError("Not authenticated", anonymous=True)
    if not requester.is_admin:
        raise UnauthorizedError()
    return requester


class ContentManager:
    """
    Create, update, delete and read posts/articles over a ContentStore.

    Parameters:
    - store: persistence backend
    - is_identifier: decides whether a lookup key is an id (vs a slug);
      id shape depends on the backend, so it is injected
    """

    def __init__(
        self,
        store: ContentStore,
        is_identifier: Callable[[str], bool] = looks_like_uuid,
    ):
        self.store = store
        self.is_identifier = is_identifier

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    @staticmethod
    def slug_for(title: str) -> str:
        slug = derive_slug(title)
        if not slug:
            raise ValidationError(
                "Title must contain at least one letter or digit",
                code="INVALID_SLUG",
            )
        return slug

    async def _resolve(self, kind: ContentKind, key: str) -> Optional[ContentItem]:
        key = (key or "").strip()
        if not key:
            return None
        if self.is_identifier(key):
            item = await self.store.find_by_id(kind, key)
            if item is not None:
                return item
        return await self.store.find_by_slug(kind, key)

    async def get_by_slug_or_id(
        self,
        kind: ContentKind,
        key: str,
        requester: Optional[Requester] = None,
    ) -> ContentItem:
        """
        Fetch one item by id or slug.

        Drafts are reported as missing to anyone but an admin, the same rule
        the listings apply.
        """
        item = await self._resolve(kind, key)
        if item is None or (not item.published and not is_admin(requester)):
            raise NotFoundError(f"{kind.label} not found")
        return item

    # ------------------------------------------------------------------
    # Mutations (admin only)
    # ------------------------------------------------------------------
    async def create_item(
        self,
        kind: ContentKind,
        requester: Optional[Requester],
        fields: Dict[str, Any],
    ) -> ContentItem:
        author = _require_admin(requester)
        title = _required_text(fields, "title")
        content = _required_text(fields, "content", strip=False)
        values: Dict[str, Any] = {"title": title, "content": content}
        if kind is ContentKind.ARTICLE:
            values["category"] = _required_text(fields, "category")

        slug = self.slug_for(title)
        if await self.store.find_by_slug(kind, slug) is not None:
            raise ConflictError(f"{kind.label} with this title already exists")

        values.update(
            slug=slug,
            tags=normalize_tags(fields.get("tags")),
            published=bool(fields.get("published") or False),
            author_id=author.id,
        )
        if kind is ContentKind.POST:
            values["excerpt"] = (fields.get("excerpt") or "").strip() or make_excerpt(content)

        item = await self.store.insert(kind, values)
        logger.info("[content] created %s slug=%s id=%s published=%s",
                    kind.value, item.slug, item.id, item.published)
        return item

    async def update_item(
        self,
        kind: ContentKind,
        requester: Optional[Requester],
        key: str,
        fields: Dict[str, Any],
    ) -> ContentItem:
        """
        Overwrite the supplied fields of an item (None means "not supplied").

        Everything is validated, and a renamed item's new slug is checked
        against every other item, before anything is written.
        """
        _require_admin(requester)
        current = await self._resolve(kind, key)
        if current is None:
            raise NotFoundError(f"{kind.label} not found")

        changes: Dict[str, Any] = {}
        if fields.get("title") is not None:
            title = _required_text(fields, "title")
            slug = self.slug_for(title)
            if slug != current.slug:
                clash = await self.store.find_by_slug(kind, slug, exclude_id=current.id)
                if clash is not None:
                    raise ConflictError(f"{kind.label} with this title already exists")
            changes.update(title=title, slug=slug)
        if fields.get("content") is not None:
            changes["content"] = _required_text(fields, "content", strip=False)
        if kind is ContentKind.ARTICLE and fields.get("category") is not None:
            changes["category"] = _required_text(fields, "category")
        if fields.get("tags") is not None:
            changes["tags"] = normalize_tags(fields["tags"])
        if fields.get("published") is not None:
            changes["published"] = bool(fields["published"])
        if kind is ContentKind.POST and "excerpt" in fields:
            excerpt = (fields.get("excerpt") or "").strip()
            changes["excerpt"] = excerpt or make_excerpt(changes.get("content", current.content))
        elif kind is ContentKind.POST and "content" in changes:
            # An auto-generated excerpt follows the body; a hand-written one is kept
            if current.excerpt == make_excerpt(current.content):
                changes["excerpt"] = make_excerpt(changes["content"])

        updated = await self.store.update(kind, current.id, changes)
        if updated is None:
            raise NotFoundError(f"{kind.label} not found")
        logger.info("[content] updated %s id=%s fields=%s", kind.value, updated.id, sorted(changes))
        return updated

    async def delete_item(
        self,
        kind: ContentKind,
        requester: Optional[Requester],
        key: str,
    ) -> ContentItem:
        """Permanently delete the item `key` resolves to; returns what was removed."""
        _require_admin(requester)
        item = await self._resolve(kind, key)
        if item is None or not await self.store.delete(kind, item.id):
            raise NotFoundError(f"{kind.label} not found")
        logger.info("[content] deleted %s slug=%s id=%s", kind.value, item.slug, item.id)
        return item

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------
    async def list_visible(
        self,
        kind: ContentKind,
        requester: Optional[Requester] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[ContentItem]:
        """All items for admins, published ones for everybody else."""
        return await self.store.list_sorted(
            kind,
            published_only=not is_admin(requester),
            offset=offset,
            limit=limit,
        )

    async def count_visible(self, kind: ContentKind, requester: Optional[Requester] = None) -> int:
        return await self.store.count(kind, published=None if is_admin(requester) else True)

    async def list_by_category(
        self,
        category: str,
        requester: Optional[Requester] = None,
    ) -> List[ContentItem]:
        """
        Visible articles whose category matches `category` ignoring case.

        Note: category_counts() groups case-sensitively, so "Python" and
        "python" are two entries there but one category page here.
        """
        wanted = category.strip().lower()
        articles = await self.list_visible(ContentKind.ARTICLE, requester)
        return [a for a in articles if (a.category or "").lower() == wanted]

    async def category_counts(self) -> List[Tuple[str, int]]:
        """(category, published article count) pairs sorted by category name."""
        return await self.store.group_count(ContentKind.ARTICLE, "category", published_only=True)

    async def totals(self, kinds: Iterable[ContentKind] = tuple(ContentKind)) -> Dict[str, Dict[str, int]]:
        """Per-kind total and published counts for the admin dashboard."""
        out = {}
        for kind in kinds:
            out[kind.value] = {
                "total": await self.store.count(kind),
                "published": await self.store.count(kind, published=True),
            }
        return out
