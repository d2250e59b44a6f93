# miniblog/models/post.py
"""
Database model for blog posts.
A post belongs to the account that wrote it and owns its comments.
"""
from tortoise import fields, models

class Post(models.Model):
    """
    Post database model.

    Relationships:
    - Belongs to a User (many-to-one); cascade delete with the user
    - Has many Comments (one-to-many, via related_name="comments"); deleted with the post
    """
    id = fields.IntField(primary_key=True)
    title = fields.CharField(max_length=200, index=True)  # 3-200 chars
    content = fields.TextField()  # 10-10000 chars
    image_path = fields.CharField(max_length=500, null=True)  # Optional image reference
    user = fields.ForeignKeyField(
        "models.User",
        related_name="posts",
        on_delete=fields.CASCADE
    )  # Owner; if the user is deleted, their posts are deleted
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(null=True)  # Set on every update, null until the first one

    class Meta:
        table = "posts"
