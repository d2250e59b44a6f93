# miniblog/api/v1/routers/posts.py
import math

from fastapi import APIRouter, Depends, Query, status

from miniblog.api.v1.deps import get_post_service, require_actor
from miniblog.core.errors import InvalidInput
from miniblog.core.security import TokenClaims
from miniblog.schemas.post import CreatePostIn, UpdatePostIn, to_post_detail_out, to_post_out
from miniblog.services.posts import PostService

router = APIRouter(prefix="/posts", tags=["posts"])

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

@router.get("")
async def list_posts(
    pageNumber: int = Query(1),
    pageSize: int = Query(DEFAULT_PAGE_SIZE),
    service: PostService = Depends(get_post_service),
):
    """
    Get a page of posts, newest first (public).

    Out-of-range input is clamped rather than rejected: pageNumber < 1 becomes 1
    and a pageSize outside 1-100 falls back to 10.
    """
    if pageNumber < 1:
        pageNumber = 1
    if pageSize < 1 or pageSize > MAX_PAGE_SIZE:
        pageSize = DEFAULT_PAGE_SIZE
    posts, total = await service.list_paged(pageNumber, pageSize)
    return {
        "success": True,
        "data": [to_post_out(p) for p in posts],
        "pagination": {
            "currentPage": pageNumber,
            "pageSize": pageSize,
            "totalCount": total,
            "totalPages": math.ceil(total / pageSize),
        },
    }

@router.get("/search")
async def search_posts(query: str = Query(min_length=1), service: PostService = Depends(get_post_service)):
    """Case-insensitive search on post titles (public)."""
    query = query.strip()
    if not query:
        raise InvalidInput("Query parameter is required")
    posts = await service.search(query)
    return {"success": True, "query": query, "count": len(posts), "data": [to_post_out(p) for p in posts]}

@router.get("/my-posts")
async def my_posts(actor: TokenClaims = Depends(require_actor), service: PostService = Depends(get_post_service)):
    posts = await service.list_for_actor(actor)
    return {"success": True, "count": len(posts), "data": [to_post_out(p) for p in posts]}

@router.get("/{post_id}")
async def get_post(post_id: int, service: PostService = Depends(get_post_service)):
    """Post with its author and comments (public)."""
    post = await service.get_details(post_id)
    return {"success": True, "data": to_post_detail_out(post)}

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    body: CreatePostIn,
    actor: TokenClaims = Depends(require_actor),
    service: PostService = Depends(get_post_service),
):
    post = await service.create(actor, body.title, body.content, body.imagePath)
    return {"success": True, "data": to_post_detail_out(post)}

@router.put("/{post_id}")
async def update_post(
    post_id: int,
    body: UpdatePostIn,
    actor: TokenClaims = Depends(require_actor),
    service: PostService = Depends(get_post_service),
):
    """
    Update a post (owner only).

    Raises:
        NOT_FOUND (404): If the post does not exist
        FORBIDDEN (403): If the caller is not the author
    """
    post = await service.update(actor, post_id, body.title, body.content, body.imagePath)
    return {"success": True, "message": "Post updated successfully", "data": to_post_detail_out(post)}

@router.delete("/{post_id}")
async def delete_post(
    post_id: int,
    actor: TokenClaims = Depends(require_actor),
    service: PostService = Depends(get_post_service),
):
    """Delete a post and all its comments (owner only)."""
    await service.delete(actor, post_id)
    return {"success": True, "message": "Post deleted successfully"}
