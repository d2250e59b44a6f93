# miniblog/models/comment.py
from tortoise import fields, models

class Comment(models.Model):
    id = fields.IntField(primary_key=True)
    content = fields.TextField()  # 1-1000 chars
    post = fields.ForeignKeyField(
        "models.Post",
        related_name="comments",
        on_delete=fields.CASCADE
    )  # Deleting a post deletes its comments
    user = fields.ForeignKeyField(
        "models.User",
        related_name="comments",
        on_delete=fields.RESTRICT
    )  # Deleting a user who still has comments is refused
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "comments"
