"""
Comment endpoints, nested under the blog post they belong to.
"""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session, joinedload

from ..auth import authenticate
from ..db import get_db
from ..errors import NotFoundError
from ..models import Comment
from ..schemas import (
    CommentCreate,
    CommentUpdate,
    CommentOut,
    CommentWithAuthor,
    CommentResponse,
    CommentListResponse,
    MessageResponse,
    ErrorResponse,
)
from .posts import apply_updates, check_ownership, get_post_or_404, load_author

router = APIRouter(prefix="/api/blogs/comments", tags=["Comments"])
logger = logging.getLogger(__name__)

NOT_FOUND_RESPONSES = {404: {"model": ErrorResponse, "description": "Blog post or comment not found"}}


def get_comment_or_404(db: Session, post_id: int, comment_id: int) -> Comment:
    """Load a comment that belongs to the given post."""
    get_post_or_404(db, post_id)
    comment = db.get(Comment, comment_id)
    if comment is None or comment.post_id != post_id:
        raise NotFoundError("Comment not found")
    return comment


@router.post(
    "/{blog_id}",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND_RESPONSES,
)
def create_comment(
    blog_id: int,
    payload: CommentCreate,
    user_id: int = Depends(authenticate),
    db: Session = Depends(get_db),
):
    author = load_author(db, user_id)
    post = get_post_or_404(db, blog_id)
    comment = Comment(content=payload.content, author_id=author.id, post_id=post.id)
    db.add(comment)
    db.commit()
    db.refresh(comment)
    logger.info("Comment %s added to blog post %s by user %s", comment.id, post.id, author.id)
    return CommentResponse(message="Comment added", comment=CommentOut.model_validate(comment))


@router.get("/{blog_id}", response_model=CommentListResponse)
def list_comments(blog_id: int, db: Session = Depends(get_db)):
    comments = (
        db.query(Comment)
        .options(joinedload(Comment.author))
        .filter(Comment.post_id == blog_id)
        .order_by(Comment.id)
        .all()
    )
    return CommentListResponse(
        message="Comments",
        comments=[CommentWithAuthor.model_validate(comment) for comment in comments],
    )


@router.put("/{blog_id}/{comment_id}", response_model=CommentResponse, responses=NOT_FOUND_RESPONSES)
def update_comment(
    blog_id: int,
    comment_id: int,
    payload: CommentUpdate,
    user_id: int = Depends(authenticate),
    db: Session = Depends(get_db),
):
    comment = get_comment_or_404(db, blog_id, comment_id)
    check_ownership(comment, user_id, "comment")
    if apply_updates(comment, payload):
        db.commit()
        db.refresh(comment)
        logger.info("Comment %s updated by user %s", comment.id, user_id)
    return CommentResponse(message="Comment updated successfully", comment=CommentOut.model_validate(comment))


@router.delete("/{blog_id}/{comment_id}", response_model=MessageResponse, responses=NOT_FOUND_RESPONSES)
def delete_comment(
    blog_id: int,
    comment_id: int,
    user_id: int = Depends(authenticate),
    db: Session = Depends(get_db),
):
    comment = get_comment_or_404(db, blog_id, comment_id)
    check_ownership(comment, user_id, "comment")
    db.delete(comment)
    db.commit()
    logger.info("Comment %s deleted by user %s", comment_id, user_id)
    return MessageResponse(message="Comment deleted successfully")
