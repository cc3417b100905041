from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from typing import List
from loguru import logger

from app.api.dependencies import get_interaction_service, get_session_id
from app.core.errors import CmsError
from app.models.common import GenericResponse
from app.models.interaction import Comment, CommentSubmission, LikeStatus, NewComment
from app.services.interaction_service import InteractionService

router = APIRouter()


def _failure(message: str, status_code: int = 502) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=GenericResponse(success=False, message=message).model_dump(),
    )


def _require_session(session_id: str) -> str:
    if not session_id:
        raise HTTPException(status_code=400, detail="Missing X-Session-Id header")
    return session_id


@router.get("/{post_id}/comments", response_model=List[Comment])
async def get_comments(post_id: str, service: InteractionService = Depends(get_interaction_service)):
    """Get approved comments of a blog post"""
    return await service.get_comments_by_post_id(post_id)


@router.post("/{post_id}/comments", response_model=GenericResponse[Comment], status_code=201)
async def submit_comment(
    post_id: str,
    submission: CommentSubmission,
    service: InteractionService = Depends(get_interaction_service),
):
    """Submit a comment; it stays hidden until approved by a moderator"""
    comment = await service.create_comment(
        NewComment(blog_post_id=post_id, **submission.model_dump())
    )
    if comment is None:
        return _failure("Failed to submit comment. Please try again.")
    return GenericResponse(
        success=True,
        data=comment,
        message="Comment submitted successfully! It will appear after moderation.",
    )


@router.get("/{post_id}/likes", response_model=LikeStatus)
async def get_like_status(
    post_id: str,
    session_id: str = Depends(get_session_id),
    service: InteractionService = Depends(get_interaction_service),
):
    """Get the like count of a post and whether this session liked it"""
    count = await service.get_like_count_by_post_id(post_id)
    liked = await service.check_if_liked(post_id, session_id) if session_id else False
    return LikeStatus(post_id=post_id, count=count, liked=liked)


@router.post("/{post_id}/likes", response_model=GenericResponse[LikeStatus], status_code=201)
async def like_post(
    post_id: str,
    session_id: str = Depends(get_session_id),
    service: InteractionService = Depends(get_interaction_service),
):
    """Like a post for the current session"""
    _require_session(session_id)
    if not await service.create_like(post_id, session_id):
        return _failure("Could not like this post")
    count = await service.get_like_count_by_post_id(post_id)
    return GenericResponse(data=LikeStatus(post_id=post_id, count=count, liked=True))


@router.delete("/{post_id}/likes", response_model=GenericResponse[LikeStatus])
async def unlike_post(
    post_id: str,
    session_id: str = Depends(get_session_id),
    service: InteractionService = Depends(get_interaction_service),
):
    """Remove the current session's like from a post"""
    _require_session(session_id)
    try:
        like = await service.find_like(post_id, session_id)
    except (CmsError, ValueError) as e:
        logger.error(f"Error looking up like: {e}")
        return _failure("Could not unlike this post")
    if like is None:
        raise HTTPException(status_code=404, detail="Like not found")
    if not await service.delete_like(like.id, session_id):
        return _failure("Could not unlike this post")
    count = await service.get_like_count_by_post_id(post_id)
    return GenericResponse(data=LikeStatus(post_id=post_id, count=count, liked=False))
