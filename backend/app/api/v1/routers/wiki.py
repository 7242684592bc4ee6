# app/api/v1/routers/wiki.py
"""
Wiki article endpoints: article CRUD, the category index and category pages.
"""
from fastapi import APIRouter, Depends, Query, status

from app.api.v1.deps import get_requester
from app.api.v1.serializers import item_to_dict, page_to_dict
from app.core.security import Requester
from app.schemas.content import ArticleIn, ArticleUpdateIn, CategoryOut
from app.services.content import ContentManager
from app.services.store_base import ContentKind
from app.services.store_factory import get_content_manager

router = APIRouter(prefix="/wiki", tags=["wiki"])

KIND = ContentKind.ARTICLE


@router.get("")
async def list_articles(
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    requester: Requester | None = Depends(get_requester),
    manager: ContentManager = Depends(get_content_manager),
):
    """Articles ordered by category then title; drafts only for admins."""
    items = await manager.list_visible(KIND, requester, offset=offset, limit=limit)
    total = await manager.count_visible(KIND, requester)
    return {"success": True, "data": page_to_dict(items, offset, limit, total)}


@router.get("/categories", response_model=list[CategoryOut])
async def list_categories(manager: ContentManager = Depends(get_content_manager)):
    """Published article count per category (exact, case-sensitive names)."""
    return [{"name": name, "count": count} for name, count in await manager.category_counts()]


@router.get("/category/{name}")
async def category_page(
    name: str,
    requester: Requester | None = Depends(get_requester),
    manager: ContentManager = Depends(get_content_manager),
):
    """
    Articles in a category, matched case-insensitively against `name`,
    plus the category index for the sidebar.
    """
    items = await manager.list_by_category(name, requester)
    categories = await manager.category_counts()
    return {
        "success": True,
        "data": {
            "category": name,
            "items": [item_to_dict(i) for i in items],
            "categories": [{"name": n, "count": c} for n, c in categories],
        },
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_article(
    body: ArticleIn,
    requester: Requester | None = Depends(get_requester),
    manager: ContentManager = Depends(get_content_manager),
):
    """Create an article (admin only). title, content and category are required."""
    item = await manager.create_item(KIND, requester, body.model_dump())
    return {"success": True, "data": item_to_dict(item)}


@router.get("/{key}")
async def get_article(
    key: str,
    render: str | None = Query(default=None, description="Set to 'html' to include rendered markdown"),
    requester: Requester | None = Depends(get_requester),
    manager: ContentManager = Depends(get_content_manager),
):
    item = await manager.get_by_slug_or_id(KIND, key, requester)
    return {"success": True, "data": item_to_dict(item, render=render)}


@router.put("/{key}")
async def update_article(
    key: str,
    body: ArticleUpdateIn,
    requester: Requester | None = Depends(get_requester),
    manager: ContentManager = Depends(get_content_manager),
):
    item = await manager.update_item(KIND, requester, key, body.model_dump(exclude_unset=True))
    return {"success": True, "data": item_to_dict(item)}


@router.delete("/{key}")
async def delete_article(
    key: str,
    requester: Requester | None = Depends(get_requester),
    manager: ContentManager = Depends(get_content_manager),
):
    item = await manager.delete_item(KIND, requester, key)
    return {"success": True, "data": {"ok": True, "id": item.id}}
