# miniblog/models/user.py
"""
Database model for accounts.
Represents a registered user: login credentials and public profile information.
"""
from tortoise import fields, models

class User(models.Model):
    """
    User (account) database model.

    Relationships:
    - Has many Posts (one-to-many, via related_name="posts"); deleting the user deletes them
    - Has many Comments (one-to-many, via related_name="comments"); deletion is restricted

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - password_hash is never serialized to API responses
    - Username and email are unique across all users
    """
    id = fields.IntField(primary_key=True)  # Primary key: assigned by the database
    username = fields.CharField(
        max_length=50,
        unique=True,
        index=True
    )  # User login name (3-50 chars, unique, indexed for fast lookups)
    email = fields.CharField(max_length=100, unique=True, index=True)  # User email address (unique)
    password_hash = fields.CharField(max_length=255)  # Argon2 hash, never plain text
    display_name = fields.CharField(max_length=100)  # Name shown next to posts and comments
    profile_image_path = fields.CharField(max_length=500, null=True)  # Optional avatar reference
    created_at = fields.DatetimeField(auto_now_add=True)  # Timestamp when account was created

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
