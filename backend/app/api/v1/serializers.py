# app/api/v1/serializers.py
"""
Conversion of ContentItem records into API response dictionaries.
"""
from app.services.store_base import ContentItem, ContentKind
from app.services.markdown_renderer import markdown_renderer


def _iso(value):
    return value.isoformat() if value else None


def item_to_dict(item: ContentItem, render: str | None = None) -> dict:
    """
    Convert a post/article into its JSON shape.

    Args:
        item: Content record
        render: Optional output format ("html") to include rendered markdown

    Returns:
        dict: camelCase fields; `excerpt` only for posts, `category` only for articles
    """
    data = {
        "id": item.id,
        "kind": item.kind.value,
        "title": item.title,
        "slug": item.slug,
        "content": item.content,
        "tags": list(item.tags),
        "published": item.published,
        "author": {"id": item.author_id, "name": item.author_name},
        "createdAt": _iso(item.created_at),
        "updatedAt": _iso(item.updated_at),
    }
    if item.kind is ContentKind.POST:
        data["excerpt"] = item.excerpt
    else:
        data["category"] = item.category
    if render:
        data["html"] = markdown_renderer.render(item.content, render)
    return data


def page_to_dict(items: list[ContentItem], offset: int, limit: int, total: int) -> dict:
    return {
        "items": [item_to_dict(i) for i in items],
        "offset": offset,
        "limit": limit,
        "total": total,
    }
