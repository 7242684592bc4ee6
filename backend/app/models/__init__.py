# app/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: Account and authentication model
- Post: Blog post
- Article: Wiki article
"""
from .user import User
from .post import Post
from .article import Article
