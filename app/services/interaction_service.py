from typing import List, Optional

from loguru import logger

from app.core.errors import fail_soft
from app.models.interaction import Comment, Like, NewComment
from app.models.strapi import StrapiComment, StrapiLike, parse_response
from app.services.normalizers import normalize_comment, normalize_like
from app.services.strapi_client import StrapiClient, StrapiQuery


class InteractionService:
    """
    Comments and likes for blog posts.

    Reads fall back to empty values; writes report success as a bool (or the
    created object) so widgets can offer a retry.
    """

    def __init__(self, client: StrapiClient):
        self.client = client

    # ==================== COMMENTS ====================

    @fail_soft(list, "Error fetching comments for post {0!r}")
    async def get_comments_by_post_id(self, post_id: str) -> List[Comment]:
        """Approved comments only, newest first, with one level of parent."""
        query = (
            StrapiQuery()
            .relation_eq("blog_post", "documentId", post_id)
            .eq("approved", True)
            .populate("parentComment")
            .sort("createdAt:desc")
        )
        payload = await self.client.request("/comments", params=query)
        response = parse_response(List[StrapiComment], payload)
        return [normalize_comment(c) for c in response.data]

    @fail_soft(lambda: None, "Error creating comment")
    async def create_comment(self, new_comment: NewComment) -> Optional[Comment]:
        """
        Submit a comment for moderation.

        `approved` is always sent as false; the CMS overwrites it anyway.
        """
        data = {
            "content": new_comment.content,
            "authorName": new_comment.author_name,
            "authorEmail": new_comment.author_email,
            "blog_post": new_comment.blog_post_id,
            "approved": False,
        }
        if new_comment.author_website:
            data["authorWebsite"] = new_comment.author_website
        if new_comment.parent_comment_id:
            data["parentComment"] = new_comment.parent_comment_id

        payload = await self.client.request("/comments", method="POST", json={"data": data})
        response = parse_response(StrapiComment, payload)
        logger.info(f"Comentário enviado para moderação no post {new_comment.blog_post_id}")
        return normalize_comment(response.data)

    @fail_soft(bool, "Error deleting comment {0!r}")
    async def delete_comment(self, comment_id: str) -> bool:
        await self.client.request(f"/comments/{comment_id}", method="DELETE")
        return True

    # ==================== LIKES ====================

    def _like_query(self, post_id: str, session_id: Optional[str] = None) -> StrapiQuery:
        query = StrapiQuery().relation_eq("blog_post", "documentId", post_id)
        if session_id is not None:
            query.eq("sessionId", session_id)
        return query

    @fail_soft(int, "Error fetching like count for post {0!r}")
    async def get_like_count_by_post_id(self, post_id: str) -> int:
        payload = await self.client.request("/likes", params=self._like_query(post_id))
        return len(parse_response(List[StrapiLike], payload).data)

    async def find_like(self, post_id: str, session_id: str) -> Optional[Like]:
        """
        The like owned by `session_id` on `post_id`, if any.

        Unlike the other reads this propagates `CmsError`, so callers can tell
        "not liked" apart from "could not ask".
        """
        payload = await self.client.request("/likes", params=self._like_query(post_id, session_id))
        response = parse_response(List[StrapiLike], payload)
        if not response.data:
            return None
        return normalize_like(response.data[0])

    @fail_soft(bool, "Error checking like status")
    async def check_if_liked(self, post_id: str, session_id: str) -> bool:
        return await self.find_like(post_id, session_id) is not None

    @fail_soft(bool, "Error creating like")
    async def create_like(self, post_id: str, session_id: str) -> bool:
        await self.client.request(
            "/likes",
            method="POST",
            json={"data": {"blog_post": post_id, "sessionId": session_id}},
        )
        return True

    @fail_soft(bool, "Error deleting like")
    async def delete_like(self, like_id: str, session_id: str) -> bool:
        """Remove a like; the CMS only accepts it when `session_id` owns it."""
        await self.client.request(
            f"/likes/{like_id}",
            method="DELETE",
            params={"sessionId": session_id},
        )
        return True
