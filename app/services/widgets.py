"""
Client-side interaction widgets, modelled as small async state holders.

The like toggle and the comment section keep their own state, call the
`InteractionService` and reconcile locally. Neither raises: failures end up
in logs or in a banner message. Both stop mutating state once `unmount()`
has been called, so late responses cannot touch a widget that is gone.

The like toggle keeps the check-then-write protocol of the CMS: two tabs
sharing a session can both see "not liked" and both try to create a like
(the CMS rejects the second one), or both try to remove it (the second
delete gets a 404). Neither case corrupts the displayed count of the tab that
lost the race; it simply stays where it was.
"""
import asyncio
from enum import Enum
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel

from app.core.errors import CmsError
from app.models.interaction import Comment, NewComment
from app.services.interaction_service import InteractionService

SUCCESS_MESSAGE = "Comment submitted successfully! It will appear after moderation."
ERROR_MESSAGE = "Failed to submit comment. Please try again."
MISSING_FIELDS_MESSAGE = "Please fill in your name, email and comment."


class LikeState(str, Enum):
    UNKNOWN = "unknown"
    NOT_LIKED = "not-liked"
    LIKED = "liked"


class LikeToggle:
    """Like button for one post, owned by one anonymous session."""

    def __init__(self, interactions: InteractionService, post_id: str, session_id: str, initial_count: int = 0):
        self.interactions = interactions
        self.post_id = post_id
        self.session_id = session_id
        self.count = initial_count
        self.state = LikeState.UNKNOWN
        self.loading = False
        self.alive = True

    @property
    def liked(self) -> bool:
        return self.state == LikeState.LIKED

    async def mount(self) -> LikeState:
        """Look up whether this session already liked the post."""
        liked = False
        if self.session_id:
            liked = await self.interactions.check_if_liked(self.post_id, self.session_id)
        if self.alive:
            self.state = LikeState.LIKED if liked else LikeState.NOT_LIKED
        return self.state

    def unmount(self) -> None:
        self.alive = False

    async def toggle(self) -> bool:
        """
        Like or unlike the post.

        Returns:
            True when the state (and count) changed.
        """
        if self.loading or not self.session_id:
            return False

        self.loading = True
        try:
            if self.liked:
                return await self._unlike()
            return await self._like()
        finally:
            self.loading = False

    async def _like(self) -> bool:
        created = await self.interactions.create_like(self.post_id, self.session_id)
        if not created or not self.alive:
            return False
        self.state = LikeState.LIKED
        self.count += 1
        return True

    async def _unlike(self) -> bool:
        # the id of a like created in this widget is not kept, look it up again
        try:
            like = await self.interactions.find_like(self.post_id, self.session_id)
        except (CmsError, ValueError) as e:
            logger.error(f"Error toggling like: {e}")
            return False
        if like is None:
            logger.warning(f"Like of session {self.session_id} on post {self.post_id} not found")
            return False

        deleted = await self.interactions.delete_like(like.id, self.session_id)
        if not deleted or not self.alive:
            return False
        self.state = LikeState.NOT_LIKED
        self.count -= 1
        return True


class CommentForm(BaseModel):
    author_name: str = ""
    author_email: str = ""
    author_website: str = ""
    content: str = ""

    def missing_fields(self) -> List[str]:
        required = ("author_name", "author_email", "content")
        return [name for name in required if not getattr(self, name).strip()]


class CommentSection:
    """Approved-comment list plus the moderated submission form of a post."""

    def __init__(self, interactions: InteractionService, post_id: str, banner_seconds: float = 5.0):
        self.interactions = interactions
        self.post_id = post_id
        self.banner_seconds = banner_seconds
        self.comments: List[Comment] = []
        self.is_loading = True
        self.is_submitting = False
        self.show_form = False
        self.form = CommentForm()
        self.success_message = ""
        self.error_message = ""
        self.alive = True
        self._banner_timer: Optional[asyncio.TimerHandle] = None

    @property
    def count(self) -> int:
        return len(self.comments)

    async def load(self) -> List[Comment]:
        self.is_loading = True
        post_id = self.post_id
        comments = await self.interactions.get_comments_by_post_id(post_id)
        # a response for a post we already navigated away from is dropped
        if self.alive and post_id == self.post_id:
            self.comments = comments
            self.is_loading = False
        return self.comments

    async def set_post(self, post_id: str) -> List[Comment]:
        if post_id != self.post_id:
            self.post_id = post_id
            return await self.load()
        return self.comments

    def open_form(self) -> None:
        self.show_form = True

    def close_form(self) -> None:
        self.show_form = False

    def unmount(self) -> None:
        self.alive = False
        self._cancel_banner_timer()

    async def submit(self) -> bool:
        """
        Send the form for moderation.

        On success the form is reset and hidden and a success banner is shown
        for `banner_seconds`; on failure the form keeps its values and an
        error banner stays until the next attempt.
        """
        if self.is_submitting:
            return False

        self.error_message = ""
        self.success_message = ""
        self._cancel_banner_timer()

        if self.form.missing_fields():
            self.error_message = MISSING_FIELDS_MESSAGE
            return False

        self.is_submitting = True
        try:
            created = await self.interactions.create_comment(
                NewComment(
                    content=self.form.content,
                    author_name=self.form.author_name,
                    author_email=self.form.author_email,
                    author_website=self.form.author_website or None,
                    blog_post_id=self.post_id,
                )
            )
        finally:
            self.is_submitting = False

        if not self.alive:
            return created is not None

        if created is None:
            self.error_message = ERROR_MESSAGE
            return False

        self.success_message = SUCCESS_MESSAGE
        self.form = CommentForm()
        self.show_form = False
        self._banner_timer = asyncio.get_running_loop().call_later(self.banner_seconds, self._clear_success)
        return True

    def _clear_success(self) -> None:
        self.success_message = ""
        self._banner_timer = None

    def _cancel_banner_timer(self) -> None:
        if self._banner_timer is not None:
            self._banner_timer.cancel()
            self._banner_timer = None
