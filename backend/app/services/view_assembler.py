"""View Assembler — composes posts/comments with author names and derived counts.

Invariants:
    - Never fails because an author is missing: author_name becomes None
    - like_count and comment_count are computed fresh for every assembled view
    - Order of assembled lists equals the order of the input entities

Design Decisions:
    - Author lookup is an injected UserDirectory (core/repository_protocols.py), not an ORM join
    - List assembly batches each lookup into one query (names, like counts, comment counts)
"""

from collections.abc import Sequence

from app.core.assemble_views import build_comment_view, build_post_view
from app.core.repository_protocols import CommentRecord, PostRecord, UserDirectory
from app.schemas.post import CommentView, PostView
from app.services.comment_store import CommentStore
from app.services.like_toggle import LikeToggle


class ViewAssembler:
    """Builds PostView / CommentView response shapes."""

    def __init__(
        self, directory: UserDirectory, comments: CommentStore, likes: LikeToggle,
    ):
        self.directory = directory
        self.comments = comments
        self.likes = likes

    async def post_view(self, post: PostRecord) -> PostView:
        return PostView(**build_post_view(
            post,
            author_name=await self.directory.author_name(post.author_id),
            like_count=await self.likes.count_for_post(post.id),
            comment_count=await self.comments.count_for_post(post.id),
        ))

    async def post_views(self, posts: Sequence[PostRecord]) -> list[PostView]:
        if not posts:
            return []
        post_ids = [p.id for p in posts]
        names = await self.directory.author_names({p.author_id for p in posts})
        like_counts = await self.likes.count_for_posts(post_ids)
        comment_counts = await self.comments.count_for_posts(post_ids)
        return [
            PostView(**build_post_view(
                p,
                author_name=names.get(p.author_id),
                like_count=like_counts.get(p.id, 0),
                comment_count=comment_counts.get(p.id, 0),
            ))
            for p in posts
        ]

    async def comment_view(self, comment: CommentRecord) -> CommentView:
        return CommentView(**build_comment_view(
            comment, await self.directory.author_name(comment.author_id),
        ))

    async def comment_views(
        self, comments: Sequence[CommentRecord],
    ) -> list[CommentView]:
        if not comments:
            return []
        names = await self.directory.author_names({c.author_id for c in comments})
        return [
            CommentView(**build_comment_view(c, names.get(c.author_id)))
            for c in comments
        ]
