from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from typing import List, Optional

from .config import settings


class UserCreate(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=settings.PASSWORD_MIN_LENGTH)

class UserLogin(BaseModel):
    username: str
    password: str


# Records are rendered with camelCase keys (authorId, createdAt, ...)
class RecordOut(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class UserOut(RecordOut):
    id: int
    username: str
    created_at: datetime


class AuthorOut(RecordOut):
    username: str


class BlogOut(RecordOut):
    id: int
    title: str
    content: str
    author_id: int
    created_at: datetime
    updated_at: datetime


class BlogWithAuthor(BlogOut):
    author: Optional[AuthorOut] = None


class CommentOut(RecordOut):
    id: int
    content: str
    author_id: int
    post_id: int
    created_at: datetime
    updated_at: datetime


class CommentWithAuthor(CommentOut):
    author: Optional[AuthorOut] = None


# Requests
class BlogCreate(BaseModel):
    title: str
    content: str


class BlogUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class CommentCreate(BaseModel):
    content: str


class CommentUpdate(BaseModel):
    content: Optional[str] = None


# Responses
class MessageResponse(BaseModel):
    message: str


class RegistrationResponse(MessageResponse):
    user: UserOut


class LoginResponse(MessageResponse):
    token: str
    token_type: str = "bearer"


class BlogResponse(MessageResponse):
    blog: BlogOut


class BlogListResponse(MessageResponse):
    blogs: List[BlogWithAuthor]


class CommentResponse(MessageResponse):
    comment: CommentOut


class CommentListResponse(MessageResponse):
    comments: List[CommentWithAuthor]


class ErrorResponse(MessageResponse):
    error: Optional[str] = None
