# app/api/v1/routers/admin.py
from fastapi import APIRouter, Depends

from app.api.v1.deps import require_admin
from app.schemas.content import AdminStatsOut
from app.services.content import ContentManager
from app.services.store_base import ContentKind
from app.services.store_factory import get_content_manager

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/stats",
    response_model=AdminStatsOut,
    dependencies=[Depends(require_admin)],
)
async def admin_stats(manager: ContentManager = Depends(get_content_manager)):
    """
    Dashboard counters (admin only).

    Returns:
        AdminStatsOut: total/published per kind and the number of categories
        that have at least one published article
    """
    totals = await manager.totals()
    categories = await manager.category_counts()
    return {
        "posts": totals[ContentKind.POST.value],
        "articles": totals[ContentKind.ARTICLE.value],
        "categories": len(categories),
    }
