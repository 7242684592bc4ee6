# app/models/article.py
"""
Database model for wiki articles.
Articles are grouped by a free-text category (a partition key, not a foreign key).
"""
import uuid
from tortoise import fields, models

class Article(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    title = fields.CharField(max_length=512)
    slug = fields.CharField(max_length=512, unique=True, index=True)
    content = fields.TextField()
    category = fields.CharField(max_length=128, index=True)
    tags = fields.JSONField(default=list)
    published = fields.BooleanField(default=False, index=True)
    author = fields.ForeignKeyField(
        "models.User",
        related_name="articles",
        on_delete=fields.CASCADE,
    )
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "articles"
