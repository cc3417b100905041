"""
Conversion of Strapi wire payloads into the site's view models.

All functions are pure: they take a validated wire model (or a raw dict) plus
the CMS base URL, and return a view model. Media paths are made absolute,
date strings become aware datetimes and derived counters are computed from
the relations the request populated.
"""
from datetime import datetime
from typing import Any, List, Optional, Union

from app.models.blog import BlogPost
from app.models.common import Image
from app.models.interaction import Comment, Like
from app.models.podcast import Podcast
from app.models.project import Project, ProjectStatus
from app.models.strapi import (
    StrapiBlogPost,
    StrapiComment,
    StrapiImageField,
    StrapiLike,
    StrapiPodcast,
    StrapiProject,
)


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """Parse a CMS ISO-8601 timestamp; missing values stay None."""
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def media_url(base_url: str, path: str) -> str:
    """Prefix relative upload paths with the CMS base URL."""
    if path.startswith(("http://", "https://")):
        return path
    return f"{base_url.rstrip('/')}{path}"


def normalize_image(base_url: str, field: Optional[StrapiImageField], title: str) -> Optional[Image]:
    """
    Build an `Image` from an image component, or None when no file is attached.

    Alt text precedence: explicit alt, then the upload's alternativeText,
    then the entity title.
    """
    if field is None or field.url is None or not field.url.url:
        return None
    return Image(
        url=media_url(base_url, field.url.url),
        alt=field.alt or field.url.alternativeText or title,
    )


def _coerce(model, payload: Union[dict, Any]):
    if isinstance(payload, model):
        return payload
    return model.model_validate(payload)


def normalize_blog_post(base_url: str, payload: Union[StrapiBlogPost, dict]) -> BlogPost:
    post = _coerce(StrapiBlogPost, payload)
    return BlogPost(
        id=post.documentId,
        slug=post.slug,
        title=post.title,
        description=post.description,
        pub_date=parse_date(post.pubDate),
        author=post.author,
        tags=post.tags or [],
        draft=bool(post.draft),
        body=post.body,
        image=normalize_image(base_url, post.image, post.title),
        comments_count=sum(1 for c in post.comments or [] if c.approved),
        likes_count=len(post.likes or []),
    )


def _project_status(value: Optional[str]) -> Optional[ProjectStatus]:
    # unknown values from an edited CMS schema are dropped
    try:
        return ProjectStatus(value) if value else None
    except ValueError:
        return None


def normalize_project(base_url: str, payload: Union[StrapiProject, dict]) -> Project:
    project = _coerce(StrapiProject, payload)
    gallery: List[Image] = [
        Image(url=media_url(base_url, img.url), alt=img.alternativeText or project.title)
        for img in project.gallery or []
        if img.url
    ]
    return Project(
        id=project.documentId,
        slug=project.slug,
        title=project.title,
        description=project.description,
        body=project.body,
        technologies=project.technologies or [],
        live_url=project.liveUrl,
        github_url=project.githubUrl,
        featured=bool(project.featured),
        start_date=parse_date(project.startDate),
        end_date=parse_date(project.endDate),
        image=normalize_image(base_url, project.image, project.title),
        gallery=gallery,
        tags=project.tags or [],
        status=_project_status(project.status),
        order=project.order,
    )


def normalize_podcast(base_url: str, payload: Union[StrapiPodcast, dict]) -> Podcast:
    podcast = _coerce(StrapiPodcast, payload)
    return Podcast(
        id=podcast.documentId,
        slug=podcast.slug,
        title=podcast.title,
        description=podcast.description,
        audio_url=podcast.audioUrl,
        duration=podcast.duration,
        pub_date=parse_date(podcast.pubDate),
        cover_image=normalize_image(base_url, podcast.coverImage, podcast.title),
        tags=podcast.tags or [],
        transcript=podcast.transcript,
        author=podcast.author,
        episode_number=podcast.episodeNumber,
        season=podcast.season,
        featured=bool(podcast.featured),
    )


def normalize_comment(payload: Union[StrapiComment, dict], expand_parent: bool = True) -> Comment:
    """Normalize a comment, expanding `parentComment` exactly one level."""
    comment = _coerce(StrapiComment, payload)
    parent = None
    if expand_parent and comment.parentComment is not None:
        parent = normalize_comment(comment.parentComment, expand_parent=False)
    return Comment(
        id=comment.documentId,
        content=comment.content,
        author_name=comment.authorName,
        author_website=comment.authorWebsite,
        approved=comment.approved,
        created_at=parse_date(comment.createdAt),
        parent_comment=parent,
    )


def normalize_like(payload: Union[StrapiLike, dict]) -> Like:
    like = _coerce(StrapiLike, payload)
    return Like(
        id=str(like.id),
        session_id=like.sessionId,
        created_at=parse_date(like.createdAt),
    )
