# app/models/post.py
"""
Database model for blog posts.
"""
import uuid
from tortoise import fields, models

class Post(models.Model):
    """
    Blog post.

    The slug is derived from the title by the content manager; the unique
    index is what finally rejects two concurrent posts with the same title.
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    title = fields.CharField(max_length=512)
    slug = fields.CharField(max_length=512, unique=True, index=True)
    content = fields.TextField()
    excerpt = fields.TextField()
    tags = fields.JSONField(default=list)
    published = fields.BooleanField(default=False, index=True)
    author = fields.ForeignKeyField(
        "models.User",
        related_name="posts",
        on_delete=fields.CASCADE,
    )
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "posts"
