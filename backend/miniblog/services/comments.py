# miniblog/services/comments.py
import logging

from miniblog.core.errors import AuthRequired, NotFound
from miniblog.core.ownership import ensure_can_mutate
from miniblog.core.security import TokenClaims
from miniblog.models.comment import Comment
from miniblog.repositories.accounts import AccountStore
from miniblog.repositories.comments import CommentStore
from miniblog.repositories.posts import PostStore

logger = logging.getLogger(__name__)


class CommentService:
    """Comment use cases; comments are always addressed through their post."""

    def __init__(self, comments: CommentStore, posts: PostStore, accounts: AccountStore):
        self.comments = comments
        self.posts = posts
        self.accounts = accounts

    async def list_for_post(self, post_id: int) -> list[Comment]:
        if not await self.posts.records.exists(post_id):
            raise NotFound("Post", post_id)
        return await self.comments.get_by_post_id(post_id)

    async def list_for_actor(self, actor: TokenClaims) -> list[Comment]:
        return await self.comments.get_by_user_id(actor.subject_id)

    async def get(self, post_id: int, comment_id: int) -> Comment:
        comment = await self.comments.get_with_details(comment_id)
        if comment is None or comment.post_id != post_id:
            raise NotFound("Comment", comment_id)
        return comment

    async def create(self, actor: TokenClaims | None, post_id: int, content: str) -> Comment:
        if actor is None:
            raise AuthRequired()
        if not await self.posts.records.exists(post_id):
            raise NotFound("Post", post_id)
        if not await self.accounts.records.exists(actor.subject_id):
            raise AuthRequired("Account no longer exists")
        comment = Comment(content=content, post_id=post_id, user_id=actor.subject_id)
        await self.comments.records.add(comment)
        logger.info("Comment %s added to post %s by user %s", comment.id, post_id, actor.subject_id)
        return await self.get(post_id, comment.id)

    async def update(self, actor: TokenClaims | None, post_id: int, comment_id: int, content: str) -> Comment:
        comment = await self._owned(actor, post_id, comment_id)
        comment.content = content
        await self.comments.records.update(comment)
        logger.info("Comment %s updated by user %s", comment_id, actor.subject_id)
        return await self.get(post_id, comment_id)

    async def delete(self, actor: TokenClaims | None, post_id: int, comment_id: int) -> None:
        await self._owned(actor, post_id, comment_id)
        await self.comments.records.delete_by_id(comment_id)
        logger.info("Comment %s deleted by user %s", comment_id, actor.subject_id)

    async def _owned(self, actor: TokenClaims | None, post_id: int, comment_id: int) -> Comment:
        comment = await self.comments.records.get_by_id(comment_id)
        if comment is None or comment.post_id != post_id:
            raise NotFound("Comment", comment_id)
        ensure_can_mutate(actor, comment.user_id, "comments")
        return comment
