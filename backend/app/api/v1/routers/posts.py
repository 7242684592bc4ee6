# app/api/v1/routers/posts.py
"""
Blog post endpoints.

Reads are public and filtered by publication state (admins also see drafts);
writes go through ContentManager, which rejects non-admins.
"""
from fastapi import APIRouter, Depends, Query, status

from app.api.v1.deps import get_requester
from app.api.v1.serializers import item_to_dict, page_to_dict
from app.core.security import Requester
from app.schemas.content import PostIn, PostUpdateIn
from app.services.content import ContentManager
from app.services.store_base import ContentKind
from app.services.store_factory import get_content_manager

router = APIRouter(prefix="/blog", tags=["blog"])

KIND = ContentKind.POST


@router.get("")
async def list_posts(
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    requester: Requester | None = Depends(get_requester),
    manager: ContentManager = Depends(get_content_manager),
):
    """
    Posts newest first. Anonymous and regular users only get published posts.
    """
    items = await manager.list_visible(KIND, requester, offset=offset, limit=limit)
    total = await manager.count_visible(KIND, requester)
    return {"success": True, "data": page_to_dict(items, offset, limit, total)}


@router.get("/published")
async def list_published_posts(
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    manager: ContentManager = Depends(get_content_manager),
):
    """Public feed: published posts only, whoever is asking."""
    items = await manager.list_visible(KIND, None, offset=offset, limit=limit)
    total = await manager.count_visible(KIND, None)
    return {"success": True, "data": page_to_dict(items, offset, limit, total)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    body: PostIn,
    requester: Requester | None = Depends(get_requester),
    manager: ContentManager = Depends(get_content_manager),
):
    """
    Create a post (admin only). The slug is derived from the title.

    Errors:
        - 401 AUTH_REQUIRED / 403 FORBIDDEN_ADMIN_ONLY
        - 409 DUPLICATE_TITLE: another post has the same slug
        - 422 INVALID_INPUT / INVALID_SLUG
    """
    item = await manager.create_item(KIND, requester, body.model_dump())
    return {"success": True, "data": item_to_dict(item)}


@router.get("/{key}")
async def get_post(
    key: str,
    render: str | None = Query(default=None, description="Set to 'html' to include rendered markdown"),
    requester: Requester | None = Depends(get_requester),
    manager: ContentManager = Depends(get_content_manager),
):
    """Single post by id or slug. Drafts are 404 for non-admins."""
    item = await manager.get_by_slug_or_id(KIND, key, requester)
    return {"success": True, "data": item_to_dict(item, render=render)}


@router.put("/{key}")
async def update_post(
    key: str,
    body: PostUpdateIn,
    requester: Requester | None = Depends(get_requester),
    manager: ContentManager = Depends(get_content_manager),
):
    """Update the supplied fields of a post (admin only); a new title re-derives the slug."""
    item = await manager.update_item(KIND, requester, key, body.model_dump(exclude_unset=True))
    return {"success": True, "data": item_to_dict(item)}


@router.delete("/{key}")
async def delete_post(
    key: str,
    requester: Requester | None = Depends(get_requester),
    manager: ContentManager = Depends(get_content_manager),
):
    """Permanently delete a post (admin only)."""
    item = await manager.delete_item(KIND, requester, key)
    return {"success": True, "data": {"ok": True, "id": item.id}}
