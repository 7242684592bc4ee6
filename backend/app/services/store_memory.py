"""
In-memory Content Store

Keeps items in a per-kind dict for the lifetime of the process. Used by the
test suite and by CONTENT_BACKEND=memory for demos; data is lost on restart.
"""
import asyncio
import datetime as dt
import itertools
import uuid
from collections import Counter
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from app.core.exceptions import ConflictError
from .store_base import ContentItem, ContentKind, ContentStore


def _copy(item: ContentItem) -> ContentItem:
    # Callers get detached copies so they cannot mutate stored state
    return replace(item, tags=list(item.tags))


class MemoryContentStore(ContentStore):
    """Process-local ContentStore; slug uniqueness is enforced under a lock."""

    def __init__(self):
        self._items: Dict[ContentKind, Dict[str, ContentItem]] = {kind: {} for kind in ContentKind}
        self._seq: Dict[str, int] = {}  # insertion order, breaks created_at ties
        self._counter = itertools.count()
        self._lock = asyncio.Lock()

    @property
    def name(self) -> str:
        return "In-memory"

    def _sort_key(self, kind: ContentKind):
        if kind is ContentKind.POST:
            return lambda item: (item.created_at, self._seq[item.id])
        return lambda item: (item.category or "", item.title)

    def _slug_taken(self, kind: ContentKind, slug: str, exclude_id: Optional[str] = None) -> bool:
        return any(
            item.slug == slug and item.id != exclude_id
            for item in self._items[kind].values()
        )

    async def find_by_slug(self, kind, slug, exclude_id=None):
        for item in self._items[kind].values():
            if item.slug == slug and item.id != exclude_id:
                return _copy(item)
        return None

    async def find_by_id(self, kind, item_id):
        item = self._items[kind].get(str(item_id))
        return _copy(item) if item else None

    async def list_sorted(self, kind, published_only=False, offset=0, limit=None):
        items = [i for i in self._items[kind].values() if i.published or not published_only]
        items.sort(key=self._sort_key(kind), reverse=kind is ContentKind.POST)
        end = None if limit is None else offset + limit
        return [_copy(i) for i in items[offset:end]]

    async def insert(self, kind, values):
        async with self._lock:
            if self._slug_taken(kind, values["slug"]):
                raise ConflictError(f"{kind.label} with this title already exists")
            now = dt.datetime.now(dt.timezone.utc)
            item = ContentItem(
                id=str(uuid.uuid4()),
                kind=kind,
                created_at=now,
                updated_at=now,
                **values,
            )
            self._items[kind][item.id] = item
            self._seq[item.id] = next(self._counter)
            return _copy(item)

    async def update(self, kind, item_id, changes):
        async with self._lock:
            current = self._items[kind].get(str(item_id))
            if current is None:
                return None
            if "slug" in changes and self._slug_taken(kind, changes["slug"], exclude_id=current.id):
                raise ConflictError(f"{kind.label} with this title already exists")
            updated = replace(current, updated_at=dt.datetime.now(dt.timezone.utc), **changes)
            self._items[kind][current.id] = updated
            return _copy(updated)

    async def delete(self, kind, item_id):
        async with self._lock:
            removed = self._items[kind].pop(str(item_id), None)
            self._seq.pop(str(item_id), None)
            return removed is not None

    async def count(self, kind, published=None):
        return sum(
            1 for item in self._items[kind].values()
            if published is None or item.published == published
        )

    async def group_count(self, kind, field_name, published_only=True) -> List[Tuple[str, int]]:
        counts = Counter(
            getattr(item, field_name)
            for item in self._items[kind].values()
            if item.published or not published_only
        )
        return sorted(counts.items(), key=lambda pair: pair[0])
