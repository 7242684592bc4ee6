# app/schemas/content.py
"""
Pydantic schemas for blog post and wiki article endpoints.
Create models mirror the authoring forms; update models make every field
optional so only what the editor sends is overwritten.
"""
from pydantic import BaseModel
from typing import Optional, List

class PostIn(BaseModel):
    title: str
    content: str  # Markdown body
    excerpt: Optional[str] = None  # Defaults to the first 150 characters of content + "..."
    tags: List[str] = []
    published: bool = False

class PostUpdateIn(BaseModel):
    title: Optional[str] = None  # A new title re-derives the slug
    content: Optional[str] = None
    excerpt: Optional[str] = None  # Sending "" re-generates it from content
    tags: Optional[List[str]] = None
    published: Optional[bool] = None

class ArticleIn(BaseModel):
    title: str
    content: str
    category: str  # Free-text grouping label
    tags: List[str] = []
    published: bool = False

class ArticleUpdateIn(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    published: Optional[bool] = None

class CategoryOut(BaseModel):
    """A wiki category and how many published articles it holds."""
    name: str
    count: int

class MarkdownIn(BaseModel):
    """Request model for the markdown preview endpoint."""
    markdown: str
    format: str = "html"  # Only "html" is supported

class KindTotals(BaseModel):
    total: int
    published: int

class AdminStatsOut(BaseModel):
    """Dashboard counters for the admin area."""
    posts: KindTotals
    articles: KindTotals
    categories: int  # Distinct categories among published articles
