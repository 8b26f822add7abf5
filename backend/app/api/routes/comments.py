"""Comment Routes — list and create comments under a post.

Invariants:
    - Listing is public and returns [] for a post without comments (or no longer existing)
    - Creating requires a Principal and an existing post (404 otherwise)
"""

import logging

from fastapi import APIRouter, Depends, status

from app.api.dependencies import (
    get_comment_store, get_principal, get_view_assembler,
)
from app.core.domain_types import Principal
from app.schemas.post import CommentCreate, CommentView
from app.services.comment_store import CommentStore
from app.services.view_assembler import ViewAssembler

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/posts", tags=["comments"])


@router.get("/{post_id}/comments", response_model=list[CommentView])
async def list_comments(
    post_id: str,
    comments: CommentStore = Depends(get_comment_store),
    views: ViewAssembler = Depends(get_view_assembler),
):
    return await views.comment_views(await comments.list_for_post(post_id))


@router.post(
    "/{post_id}/comments",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    body: CommentCreate,
    principal: Principal = Depends(get_principal),
    comments: CommentStore = Depends(get_comment_store),
    views: ViewAssembler = Depends(get_view_assembler),
):
    comment = await comments.create(principal, post_id, body.body)
    return await views.comment_view(comment)
