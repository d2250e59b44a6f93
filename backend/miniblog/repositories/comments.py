# miniblog/repositories/comments.py
from typing import Optional

from miniblog.models.comment import Comment
from miniblog.repositories.base import RecordStore


class CommentStore:
    """Comment queries on top of the generic RecordStore."""

    def __init__(self):
        self.records: RecordStore[Comment] = RecordStore(Comment, "Comment")

    async def get_by_post_id(self, post_id: int) -> list[Comment]:
        # Conversation order: oldest first
        return await (
            Comment.filter(post_id=post_id)
            .order_by("created_at", "id")
            .prefetch_related("user")
        )

    async def get_by_user_id(self, user_id: int) -> list[Comment]:
        return await (
            Comment.filter(user_id=user_id)
            .order_by("-created_at", "-id")
            .prefetch_related("user", "post")
        )

    async def get_with_details(self, comment_id: int) -> Optional[Comment]:
        return await Comment.get_or_none(id=comment_id).prefetch_related("user", "post")
