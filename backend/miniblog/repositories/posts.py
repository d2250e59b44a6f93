# miniblog/repositories/posts.py
from typing import Optional

from tortoise.functions import Count
from tortoise.transactions import in_transaction

from miniblog.models.comment import Comment
from miniblog.models.post import Post
from miniblog.repositories.base import RecordStore

# Newest first; id breaks ties between posts created in the same instant
NEWEST_FIRST = ("-created_at", "-id")


class PostStore:
    """Post queries on top of the generic RecordStore."""

    def __init__(self):
        self.records: RecordStore[Post] = RecordStore(Post, "Post")

    def _listing(self):
        # Author and comment count are what every list view shows
        return (
            Post.all()
            .annotate(comment_count=Count("comments"))
            .order_by(*NEWEST_FIRST)
            .prefetch_related("user")
        )

    async def get_paged(self, page_number: int, page_size: int) -> list[Post]:
        """
        One page of posts, newest first.

        Expects page_number >= 1 and 1 <= page_size <= 100; callers clamp
        user input before calling.
        """
        return await self._listing().offset((page_number - 1) * page_size).limit(page_size)

    async def get_recent(self, count: int) -> list[Post]:
        return await self._listing().limit(count)

    async def search_by_title(self, term: str) -> list[Post]:
        """Case-insensitive substring match on the title, newest first."""
        return await self._listing().filter(title__icontains=term)

    async def get_by_user_id(self, user_id: int) -> list[Post]:
        return await self._listing().filter(user_id=user_id)

    async def get_with_details(self, post_id: int) -> Optional[Post]:
        """Post with its author, its comments and each comment's author."""
        return await Post.get_or_none(id=post_id).prefetch_related("user", "comments__user")

    async def delete_post(self, post: Post) -> None:
        """Delete a post and its comments in one transaction."""
        async with in_transaction() as conn:
            await Comment.filter(post_id=post.pk).using_db(conn).delete()
            await Post.filter(id=post.pk).using_db(conn).delete()
