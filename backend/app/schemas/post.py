"""Post & Comment Schemas — write payloads and assembled views.

Invariants:
    - PostView/CommentView are the only shapes returned for posts and comments
    - author_name is nullable: an unresolvable author never fails a response
    - like_count/comment_count are derived per request, never client-supplied
    - Response models serialize camelCase keys (authorName, likeCount, ...); Python code
      builds them by field name
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PostWrite(BaseModel):
    """Body of POST /posts and PUT /posts/{id}."""
    title: str = Field("", max_length=200)
    body: str = Field("", max_length=10_000)


class CommentCreate(BaseModel):
    body: str = Field("", max_length=2_000)


class _CamelResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PostView(_CamelResponse):
    id: str
    title: str
    body: str
    created_at: datetime
    author_id: str
    author_name: str | None
    like_count: int
    comment_count: int


class CommentView(_CamelResponse):
    id: str
    post_id: str
    body: str
    created_at: datetime
    author_id: str
    author_name: str | None


class LikeResult(_CamelResponse):
    like_count: int
    liked: bool


class DeleteResult(BaseModel):
    ok: bool = True
