# miniblog/services/posts.py
"""
Post use cases. The acting account is passed in explicitly; only the owner of
a post may update or delete it.
"""
import logging
from typing import Optional

from tortoise import timezone

from miniblog.core.errors import AuthRequired, NotFound
from miniblog.core.ownership import ensure_can_mutate
from miniblog.core.security import TokenClaims
from miniblog.models.post import Post
from miniblog.repositories.accounts import AccountStore
from miniblog.repositories.posts import PostStore

logger = logging.getLogger(__name__)


class PostService:
    def __init__(self, posts: PostStore, accounts: AccountStore):
        self.posts = posts
        self.accounts = accounts

    async def list_paged(self, page_number: int, page_size: int) -> tuple[list[Post], int]:
        """Page of posts plus the total number of posts. Pages past the end are empty."""
        total = await self.posts.records.count()
        if (page_number - 1) * page_size >= total:
            return [], total
        items = await self.posts.get_paged(page_number, page_size)
        return items, total

    async def search(self, query: str) -> list[Post]:
        return await self.posts.search_by_title(query)

    async def get_details(self, post_id: int) -> Post:
        post = await self.posts.get_with_details(post_id)
        if post is None:
            raise NotFound("Post", post_id)
        return post

    async def list_for_actor(self, actor: TokenClaims) -> list[Post]:
        return await self.posts.get_by_user_id(actor.subject_id)

    async def create(self, actor: TokenClaims | None, title: str, content: str,
                     image_path: Optional[str] = None) -> Post:
        if actor is None:
            raise AuthRequired()
        if not await self.accounts.records.exists(actor.subject_id):
            raise AuthRequired("Account no longer exists")
        post = Post(title=title, content=content, image_path=image_path, user_id=actor.subject_id)
        await self.posts.records.add(post)
        logger.info("Post created by user %s: %s", actor.subject_id, post.title)
        return await self.get_details(post.id)

    async def update(self, actor: TokenClaims | None, post_id: int, title: Optional[str] = None,
                     content: Optional[str] = None, image_path: Optional[str] = None) -> Post:
        """
        Edit a post. Blank title/content keep the current value; image_path
        replaces the current one whenever it is given.

        Raises:
            NotFound: If the post does not exist
            Forbidden: If the actor does not own the post
        """
        post = await self.posts.records.get_by_id(post_id)
        if post is None:
            raise NotFound("Post", post_id)
        ensure_can_mutate(actor, post.user_id, "posts")
        if title and title.strip():
            post.title = title
        if content and content.strip():
            post.content = content
        if image_path is not None:
            post.image_path = image_path
        post.updated_at = timezone.now()
        await self.posts.records.update(post)
        logger.info("Post %s updated by user %s", post.id, actor.subject_id)
        return await self.get_details(post.id)

    async def delete(self, actor: TokenClaims | None, post_id: int) -> None:
        post = await self.posts.records.get_by_id(post_id)
        if post is None:
            raise NotFound("Post", post_id)
        ensure_can_mutate(actor, post.user_id, "posts")
        await self.posts.delete_post(post)
        logger.info("Post %s deleted by user %s", post_id, actor.subject_id)
