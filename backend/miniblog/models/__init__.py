"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- User: Account and authentication model
- Post: Blog post model (belongs to User)
- Comment: Comment model (belongs to Post and User)
"""
from .user import User
from .post import Post
from .comment import Comment
