"""
Pydantic schemas for post endpoints.
"""
import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field

from miniblog.models.post import Post
from miniblog.models.user import User
from miniblog.schemas.comment import CommentOut, to_comment_out

class CreatePostIn(BaseModel):
    title: str = Field(min_length=3, max_length=200)
    content: str = Field(min_length=10, max_length=10000)
    imagePath: Optional[str] = Field(default=None, max_length=500)

class UpdatePostIn(BaseModel):
    """
    Request model for updating a post.
    Omitted (or blank) title/content keep their current value.
    """
    title: Optional[str] = Field(default=None, min_length=3, max_length=200)
    content: Optional[str] = Field(default=None, min_length=10, max_length=10000)
    imagePath: Optional[str] = Field(default=None, max_length=500)

class AuthorOut(BaseModel):
    """Public author summary shown next to posts and comments."""
    id: int
    username: str
    displayName: str
    profileImagePath: Optional[str] = None

class PostOut(BaseModel):
    id: int
    title: str
    content: str
    imagePath: Optional[str] = None
    createdAt: dt.datetime
    updatedAt: Optional[dt.datetime] = None
    author: AuthorOut
    commentCount: int = 0

class PostDetailOut(PostOut):
    comments: List[CommentOut] = []

def to_author_out(u: User) -> AuthorOut:
    return AuthorOut(
        id=u.id,
        username=u.username,
        displayName=u.display_name,
        profileImagePath=u.profile_image_path,
    )

def to_post_out(p: Post) -> PostOut:
    """Expects p.user prefetched and, for list views, the comment_count annotation."""
    return PostOut(
        id=p.id,
        title=p.title,
        content=p.content,
        imagePath=p.image_path,
        createdAt=p.created_at,
        updatedAt=p.updated_at,
        author=to_author_out(p.user),
        commentCount=getattr(p, "comment_count", 0) or 0,
    )

def to_post_detail_out(p: Post) -> PostDetailOut:
    """Expects p fetched with PostStore.get_with_details()."""
    comments = sorted(p.comments, key=lambda c: (c.created_at, c.id))
    base = to_post_out(p).model_dump()
    base["commentCount"] = len(comments)
    return PostDetailOut(**base, comments=[to_comment_out(c) for c in comments])
