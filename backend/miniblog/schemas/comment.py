"""
Pydantic schemas for comment endpoints.
"""
import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from miniblog.models.comment import Comment

class CommentIn(BaseModel):
    """Request model for creating or editing a comment."""
    content: str = Field(min_length=1, max_length=1000)

class CommentAuthorOut(BaseModel):
    id: int
    username: str
    displayName: str
    profileImagePath: Optional[str] = None

class CommentOut(BaseModel):
    id: int
    content: str
    createdAt: dt.datetime
    postId: int
    author: CommentAuthorOut

def to_comment_out(c: Comment) -> CommentOut:
    """Expects c.user prefetched."""
    return CommentOut(
        id=c.id,
        content=c.content,
        createdAt=c.created_at,
        postId=c.post_id,
        author=CommentAuthorOut(
            id=c.user.id,
            username=c.user.username,
            displayName=c.user.display_name,
            profileImagePath=c.user.profile_image_path,
        ),
    )
