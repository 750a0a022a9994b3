"""
Blog post endpoints. Every route requires a valid token.
"""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session, joinedload

from ..auth import authenticate
from ..config import settings
from ..db import get_db
from ..errors import AuthError, ForbiddenError, NotFoundError
from ..models import Post, User
from ..schemas import (
    BlogCreate,
    BlogUpdate,
    BlogOut,
    BlogWithAuthor,
    BlogResponse,
    BlogListResponse,
    MessageResponse,
    ErrorResponse,
)

router = APIRouter(prefix="/api/blogs", tags=["Blog"])
logger = logging.getLogger(__name__)

NOT_FOUND_RESPONSES = {404: {"model": ErrorResponse, "description": "Blog post not found"}}


def load_author(db: Session, user_id: int) -> User:
    """Return the token's user, who must still exist to create content."""
    user = db.get(User, user_id)
    if user is None:
        raise AuthError("User not found")
    return user


def get_post_or_404(db: Session, post_id: int) -> Post:
    post = db.get(Post, post_id)
    if post is None:
        raise NotFoundError("Blog post not found")
    return post


def check_ownership(record, user_id: int, kind: str) -> None:
    """Reject changes by anyone but the author when ownership is enforced."""
    if settings.ENFORCE_OWNERSHIP and record.author_id != user_id:
        logger.warning("User %s denied changing %s %s", user_id, kind, record.id)
        raise ForbiddenError(f"You do not have permission to modify this {kind}")


def apply_updates(record, payload) -> bool:
    """
    Copy the fields present in the request body onto the record.

    Absent and null fields are left alone; an empty string is a real value.

    Returns:
        True if any field was written
    """
    changes = {key: value for key, value in payload.model_dump(exclude_unset=True).items() if value is not None}
    for key, value in changes.items():
        setattr(record, key, value)
    return bool(changes)


@router.post("", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
def create_post(payload: BlogCreate, user_id: int = Depends(authenticate), db: Session = Depends(get_db)):
    author = load_author(db, user_id)
    post = Post(title=payload.title, content=payload.content, author_id=author.id)
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info("Blog post %s created by user %s", post.id, author.id)
    return BlogResponse(message="Blog post created successfully", blog=BlogOut.model_validate(post))


@router.get("", response_model=BlogListResponse)
def list_posts(user_id: int = Depends(authenticate), db: Session = Depends(get_db)):
    posts = db.query(Post).options(joinedload(Post.author)).order_by(Post.id).all()
    return BlogListResponse(
        message="Blog posts",
        blogs=[BlogWithAuthor.model_validate(post) for post in posts],
    )


@router.get("/{post_id}", response_model=BlogResponse, responses=NOT_FOUND_RESPONSES)
def get_post(post_id: int, user_id: int = Depends(authenticate), db: Session = Depends(get_db)):
    post = get_post_or_404(db, post_id)
    return BlogResponse(message="Blog post", blog=BlogOut.model_validate(post))


@router.put("/{post_id}", response_model=BlogResponse, responses=NOT_FOUND_RESPONSES)
def update_post(
    post_id: int,
    payload: BlogUpdate,
    user_id: int = Depends(authenticate),
    db: Session = Depends(get_db),
):
    post = get_post_or_404(db, post_id)
    check_ownership(post, user_id, "blog post")
    if apply_updates(post, payload):
        db.commit()
        db.refresh(post)
        logger.info("Blog post %s updated by user %s", post.id, user_id)
    return BlogResponse(message="Blog post updated", blog=BlogOut.model_validate(post))


@router.delete("/{post_id}", response_model=MessageResponse, responses=NOT_FOUND_RESPONSES)
def delete_post(post_id: int, user_id: int = Depends(authenticate), db: Session = Depends(get_db)):
    post = get_post_or_404(db, post_id)
    check_ownership(post, user_id, "blog post")
    # Comments go with the post
    db.delete(post)
    db.commit()
    logger.info("Blog post %s deleted by user %s", post_id, user_id)
    return MessageResponse(message="Blog post deleted")
