"""
Tortoise ORM Content Store

Maps ContentKind onto the `posts` / `articles` tables. The unique index on
`slug` turns a lost check-then-write race into a ConflictError instead of a
duplicate row.
"""
import logging
from typing import Dict, List, Optional, Tuple

from tortoise.exceptions import IntegrityError
from tortoise.functions import Count

from app.core.exceptions import ConflictError
from app.models.article import Article
from app.models.post import Post
from .store_base import ContentItem, ContentKind, ContentStore, looks_like_uuid

logger = logging.getLogger("uvicorn.error")

_MODELS = {
    ContentKind.POST: Post,
    ContentKind.ARTICLE: Article,
}


def _to_item(kind: ContentKind, row) -> ContentItem:
    """Convert a fetched Post/Article row (author prefetched) into a ContentItem."""
    author = row.author if hasattr(row.author, "name") else None
    return ContentItem(
        id=str(row.id),
        kind=kind,
        title=row.title,
        slug=row.slug,
        content=row.content,
        author_id=str(row.author_id),
        tags=list(row.tags or []),
        published=row.published,
        excerpt=getattr(row, "excerpt", None),
        category=getattr(row, "category", None),
        author_name=author.name if author else None,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class TortoiseContentStore(ContentStore):
    """ContentStore backed by Tortoise ORM (PostgreSQL in production, SQLite in tests)."""

    @property
    def name(self) -> str:
        return "Tortoise ORM"

    async def find_by_slug(self, kind, slug, exclude_id=None):
        qs = _MODELS[kind].filter(slug=slug)
        if exclude_id:
            qs = qs.exclude(id=exclude_id)
        row = await qs.prefetch_related("author").first()
        return _to_item(kind, row) if row else None

    async def find_by_id(self, kind, item_id):
        if not looks_like_uuid(item_id):
            return None  # UUIDField rejects anything else before querying
        row = await _MODELS[kind].get_or_none(id=item_id).prefetch_related("author")
        return _to_item(kind, row) if row else None

    async def list_sorted(self, kind, published_only=False, offset=0, limit=None):
        qs = _MODELS[kind].all()
        if published_only:
            qs = qs.filter(published=True)
        qs = qs.order_by(*kind.ordering)
        if offset:
            qs = qs.offset(offset)
        if limit is not None:
            qs = qs.limit(limit)
        rows = await qs.prefetch_related("author")
        return [_to_item(kind, row) for row in rows]

    async def insert(self, kind, values):
        model = _MODELS[kind]
        try:
            row = await model.create(**values)
        except IntegrityError as e:
            if await self.find_by_slug(kind, values.get("slug")) is None:
                raise  # not a slug clash (e.g. unknown author_id)
            logger.info("[content] %s insert rejected by unique index (slug=%s): %s",
                        kind.value, values.get("slug"), e)
            raise ConflictError(f"{kind.label} with this title already exists")
        await row.fetch_related("author")
        return _to_item(kind, row)

    async def update(self, kind, item_id, changes):
        row = await _MODELS[kind].get_or_none(id=item_id).prefetch_related("author")
        if row is None:
            return None
        for key, value in changes.items():
            setattr(row, key, value)
        try:
            await row.save()  # auto_now refreshes updated_at
        except IntegrityError as e:
            slug = changes.get("slug")
            if slug is None or await self.find_by_slug(kind, slug, exclude_id=item_id) is None:
                raise
            logger.info("[content] %s update rejected by unique index (slug=%s): %s",
                        kind.value, slug, e)
            raise ConflictError(f"{kind.label} with this title already exists")
        return _to_item(kind, row)

    async def delete(self, kind, item_id):
        deleted = await _MODELS[kind].filter(id=item_id).delete()
        return deleted > 0

    async def count(self, kind, published=None):
        qs = _MODELS[kind].all()
        if published is not None:
            qs = qs.filter(published=published)
        return await qs.count()

    async def group_count(self, kind, field_name, published_only=True) -> List[Tuple[str, int]]:
        qs = _MODELS[kind].all()
        if published_only:
            qs = qs.filter(published=True)
        rows: List[Dict] = await (
            qs.annotate(count=Count("id"))
            .group_by(field_name)
            .values(field_name, "count")
        )
        # Sort in Python so the order does not depend on the database collation
        return sorted(((r[field_name], r["count"]) for r in rows), key=lambda pair: pair[0])
