# app/api/v1/routers/markdown.py
from fastapi import APIRouter

from app.schemas.content import MarkdownIn
from app.services.markdown_renderer import markdown_renderer
from app.core.exceptions import ValidationError

router = APIRouter(tags=["markdown"])


@router.post("/markdown")
async def render_markdown(body: MarkdownIn):
    """
    Render markdown for the editor preview.

    Returns:
        dict: {"htmlContent": "<p>...</p>"}

    Errors:
        - 422 INVALID_INPUT: empty markdown
        - 422 UNSUPPORTED_FORMAT: anything other than "html"
    """
    if not body.markdown.strip():
        raise ValidationError("Markdown content is required", code="INVALID_INPUT")
    return {"htmlContent": markdown_renderer.render(body.markdown, body.format)}
