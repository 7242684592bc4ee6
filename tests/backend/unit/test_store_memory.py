"""
Unit tests for services.store_memory module.
"""
import uuid

import pytest

from app.core.exceptions import ConflictError
from app.services.store_base import ContentKind
from app.services.store_memory import MemoryContentStore

pytestmark = pytest.mark.asyncio


def _values(slug, **extra):
    values = {
        "title": slug.title(),
        "slug": slug,
        "content": "body",
        "author_id": str(uuid.uuid4()),
        "tags": ["a"],
        "published": True,
    }
    values.update(extra)
    return values


async def test_insert_assigns_uuid_and_timestamps():
    store = MemoryContentStore()
    item = await store.insert(ContentKind.POST, _values("first"))
    assert uuid.UUID(item.id)
    assert item.kind is ContentKind.POST
    assert item.created_at == item.updated_at


async def test_insert_enforces_slug_uniqueness_per_kind():
    store = MemoryContentStore()
    await store.insert(ContentKind.POST, _values("same"))
    with pytest.raises(ConflictError):
        await store.insert(ContentKind.POST, _values("same"))
    # Another kind is a separate namespace
    await store.insert(ContentKind.ARTICLE, _values("same", category="Misc"))


async def test_update_rejects_slug_of_another_item():
    store = MemoryContentStore()
    await store.insert(ContentKind.POST, _values("one"))
    two = await store.insert(ContentKind.POST, _values("two"))
    with pytest.raises(ConflictError):
        await store.update(ContentKind.POST, two.id, {"slug": "one"})
    assert (await store.find_by_id(ContentKind.POST, two.id)).slug == "two"


async def test_returned_items_are_copies():
    store = MemoryContentStore()
    item = await store.insert(ContentKind.POST, _values("copy"))
    item.tags.append("mutated")
    item.title = "Mutated"
    stored = await store.find_by_id(ContentKind.POST, item.id)
    assert stored.tags == ["a"]
    assert stored.title == "Copy"


async def test_find_by_slug_excluding_self():
    store = MemoryContentStore()
    item = await store.insert(ContentKind.POST, _values("mine"))
    assert await store.find_by_slug(ContentKind.POST, "mine", exclude_id=item.id) is None
    assert (await store.find_by_slug(ContentKind.POST, "mine")).id == item.id


async def test_update_and_delete_missing_item():
    store = MemoryContentStore()
    assert await store.update(ContentKind.POST, str(uuid.uuid4()), {"title": "x"}) is None
    assert await store.delete(ContentKind.POST, str(uuid.uuid4())) is False


async def test_count_and_group_count():
    store = MemoryContentStore()
    await store.insert(ContentKind.ARTICLE, _values("a", category="Go"))
    await store.insert(ContentKind.ARTICLE, _values("b", category="Python"))
    await store.insert(ContentKind.ARTICLE, _values("c", category="Python", published=False))
    assert await store.count(ContentKind.ARTICLE) == 3
    assert await store.count(ContentKind.ARTICLE, published=False) == 1
    assert await store.group_count(ContentKind.ARTICLE, "category") == [("Go", 1), ("Python", 1)]
    assert await store.group_count(ContentKind.ARTICLE, "category", published_only=False) == [
        ("Go", 1), ("Python", 2),
    ]
