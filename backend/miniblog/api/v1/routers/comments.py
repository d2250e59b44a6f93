# miniblog/api/v1/routers/comments.py
from fastapi import APIRouter, Depends, status

from miniblog.api.v1.deps import get_comment_service, require_actor
from miniblog.core.security import TokenClaims
from miniblog.schemas.comment import CommentIn, to_comment_out
from miniblog.services.comments import CommentService

# Comments are nested under their post: /posts/{post_id}/comments
router = APIRouter(prefix="/posts/{post_id}/comments", tags=["comments"])
# Routes that are not scoped to a single post
my_router = APIRouter(prefix="/comments", tags=["comments"])

@router.get("")
async def list_comments(post_id: int, service: CommentService = Depends(get_comment_service)):
    """All comments of a post, oldest first (public)."""
    comments = await service.list_for_post(post_id)
    return {"success": True, "count": len(comments), "data": [to_comment_out(c) for c in comments]}

@router.get("/{comment_id}")
async def get_comment(post_id: int, comment_id: int, service: CommentService = Depends(get_comment_service)):
    comment = await service.get(post_id, comment_id)
    return {"success": True, "data": to_comment_out(comment)}

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_comment(
    post_id: int,
    body: CommentIn,
    actor: TokenClaims = Depends(require_actor),
    service: CommentService = Depends(get_comment_service),
):
    comment = await service.create(actor, post_id, body.content)
    return {"success": True, "data": to_comment_out(comment)}

@router.put("/{comment_id}")
async def update_comment(
    post_id: int,
    comment_id: int,
    body: CommentIn,
    actor: TokenClaims = Depends(require_actor),
    service: CommentService = Depends(get_comment_service),
):
    """Edit a comment (author only)."""
    comment = await service.update(actor, post_id, comment_id, body.content)
    return {"success": True, "message": "Comment updated successfully", "data": to_comment_out(comment)}

@router.delete("/{comment_id}")
async def delete_comment(
    post_id: int,
    comment_id: int,
    actor: TokenClaims = Depends(require_actor),
    service: CommentService = Depends(get_comment_service),
):
    """Delete a comment (author only)."""
    await service.delete(actor, post_id, comment_id)
    return {"success": True, "message": "Comment deleted successfully"}

@my_router.get("/my-comments")
async def my_comments(actor: TokenClaims = Depends(require_actor), service: CommentService = Depends(get_comment_service)):
    comments = await service.list_for_actor(actor)
    return {"success": True, "count": len(comments), "data": [to_comment_out(c) for c in comments]}
