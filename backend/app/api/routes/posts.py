"""Post Routes — feed listing, post CRUD and like toggling.

Invariants:
    - Listing and single-post reads are public; every mutation requires a Principal
    - Update/delete ownership is enforced by PostStore, not here
    - Responses are assembled views (author name, like and comment counts)

Design Decisions:
    - Routes stay thin: parse → store/toggle → ViewAssembler
"""

import logging

from fastapi import APIRouter, Depends, status

from app.api.dependencies import (
    get_like_toggle, get_post_store, get_principal, get_view_assembler,
)
from app.core.domain_types import Principal
from app.schemas.post import DeleteResult, LikeResult, PostView, PostWrite
from app.services.like_toggle import LikeToggle
from app.services.post_store import PostStore
from app.services.view_assembler import ViewAssembler

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=list[PostView])
async def list_posts(
    posts: PostStore = Depends(get_post_store),
    views: ViewAssembler = Depends(get_view_assembler),
):
    """Newest-first feed snapshot."""
    return await views.post_views(await posts.list_all())


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    posts: PostStore = Depends(get_post_store),
    views: ViewAssembler = Depends(get_view_assembler),
):
    return await views.post_view(await posts.get(post_id))


@router.post(
    "", response_model=PostView, status_code=status.HTTP_201_CREATED,
)
async def create_post(
    body: PostWrite,
    principal: Principal = Depends(get_principal),
    posts: PostStore = Depends(get_post_store),
    views: ViewAssembler = Depends(get_view_assembler),
):
    post = await posts.create(principal, body.title, body.body)
    return await views.post_view(post)


@router.put("/{post_id}", response_model=PostView)
async def update_post(
    post_id: str,
    body: PostWrite,
    principal: Principal = Depends(get_principal),
    posts: PostStore = Depends(get_post_store),
    views: ViewAssembler = Depends(get_view_assembler),
):
    post = await posts.update(principal, post_id, body.title, body.body)
    return await views.post_view(post)


@router.delete("/{post_id}", response_model=DeleteResult)
async def delete_post(
    post_id: str,
    principal: Principal = Depends(get_principal),
    posts: PostStore = Depends(get_post_store),
):
    await posts.delete(principal, post_id)
    return DeleteResult(ok=True)


@router.post("/{post_id}/like", response_model=LikeResult)
async def toggle_like(
    post_id: str,
    principal: Principal = Depends(get_principal),
    likes: LikeToggle = Depends(get_like_toggle),
):
    outcome = await likes.toggle(principal, post_id)
    return LikeResult(like_count=outcome.like_count, liked=outcome.liked)
