# miniblog/repositories/accounts.py
import logging
from typing import Optional

from tortoise.transactions import in_transaction

from miniblog.core.errors import DeleteRestricted
from miniblog.models.comment import Comment
from miniblog.models.post import Post
from miniblog.models.user import User
from miniblog.repositories.base import RecordStore

logger = logging.getLogger(__name__)


class AccountStore:
    """Account queries on top of the generic RecordStore."""

    def __init__(self):
        self.records: RecordStore[User] = RecordStore(User, "User")

    async def get_by_username(self, username: str) -> Optional[User]:
        return await User.get_or_none(username=username)

    async def get_by_email(self, email: str) -> Optional[User]:
        return await User.get_or_none(email=email)

    async def username_exists(self, username: str) -> bool:
        return await User.filter(username=username).exists()

    async def email_exists(self, email: str) -> bool:
        return await User.filter(email=email).exists()

    async def get_with_posts(self, user_id: int) -> Optional[User]:
        """Account with its posts loaded (newest first is left to the caller)."""
        return await User.get_or_none(id=user_id).prefetch_related("posts")

    async def delete_account(self, user_id: int) -> None:
        """
        Delete an account together with its posts and the comments on those posts.

        Comments the account wrote on other people's posts are kept, so the
        deletion is refused while any exist.

        Raises:
            DeleteRestricted: If the account still authors comments on posts it does not own
        """
        async with in_transaction() as conn:
            if not await User.filter(id=user_id).using_db(conn).exists():
                return
            post_ids = await Post.filter(user_id=user_id).using_db(conn).values_list("id", flat=True)
            authored = Comment.filter(user_id=user_id)
            if post_ids:
                authored = authored.exclude(post_id__in=post_ids)
            if await authored.using_db(conn).exists():
                raise DeleteRestricted("Account still has comments on other posts")
            # Children before parents, mirroring the foreign key cascade
            if post_ids:
                await Comment.filter(post_id__in=post_ids).using_db(conn).delete()
                await Post.filter(id__in=post_ids).using_db(conn).delete()
            await User.filter(id=user_id).using_db(conn).delete()
        logger.info("Account %s deleted with %d posts", user_id, len(post_ids))
