# app/models/user.py
"""
Database model for users.
Represents an account that can sign in; admins author blog posts and wiki
articles, regular users can only read.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Relationships:
    - Has many Posts (related_name="posts")
    - Has many Articles (related_name="articles")

    Security:
    - Password is stored only as a salted hash
    - Email is the login identifier and must be unique
    - The first registered user is promoted to admin
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    name = fields.CharField(max_length=256)
    email = fields.CharField(max_length=256, unique=True, index=True)
    password_hash = fields.CharField(max_length=255)
    role = fields.CharField(max_length=16, default="user")  # "user" or "admin"
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "users"

    def __str__(self):
        return self.email
