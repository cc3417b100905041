from typing import Any, Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict

T = TypeVar('T')


class StrapiModel(BaseModel):
    """Base for CMS wire payloads; unknown attributes are ignored."""

    model_config = ConfigDict(extra="ignore")


class StrapiPagination(StrapiModel):
    page: int = 1
    pageSize: int = 0
    pageCount: int = 0
    total: int = 0


class StrapiMeta(StrapiModel):
    pagination: Optional[StrapiPagination] = None


class StrapiResponse(StrapiModel, Generic[T]):
    """Envelope `{data, meta}` returned by every CMS endpoint."""

    data: T
    meta: StrapiMeta = StrapiMeta()


class StrapiMediaFile(StrapiModel):
    id: Optional[int] = None
    url: Optional[str] = None
    alternativeText: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class StrapiImageField(StrapiModel):
    """Image component: a media relation plus an optional explicit alt."""

    url: Optional[StrapiMediaFile] = None
    alt: Optional[str] = None


class StrapiLike(StrapiModel):
    id: int
    documentId: Optional[str] = None
    sessionId: str = ""
    createdAt: Optional[str] = None


class StrapiComment(StrapiModel):
    id: Optional[int] = None
    documentId: str
    content: str = ""
    authorName: str = ""
    authorEmail: Optional[str] = None
    authorWebsite: Optional[str] = None
    approved: bool = False
    parentComment: Optional["StrapiComment"] = None
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None


class StrapiBlogPost(StrapiModel):
    id: Optional[int] = None
    documentId: str
    title: str = ""
    description: str = ""
    pubDate: Optional[str] = None
    author: Optional[str] = None
    tags: Optional[List[str]] = None
    draft: Optional[bool] = None
    slug: str = ""
    body: Optional[str] = None
    image: Optional[StrapiImageField] = None
    comments: Optional[List[StrapiComment]] = None
    likes: Optional[List[StrapiLike]] = None
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None
    publishedAt: Optional[str] = None


class StrapiProject(StrapiModel):
    id: Optional[int] = None
    documentId: str
    title: str = ""
    description: str = ""
    slug: str = ""
    body: Optional[str] = None
    technologies: Optional[List[str]] = None
    liveUrl: Optional[str] = None
    githubUrl: Optional[str] = None
    featured: Optional[bool] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    image: Optional[StrapiImageField] = None
    gallery: Optional[List[StrapiMediaFile]] = None
    tags: Optional[List[str]] = None
    status: Optional[str] = None
    order: Optional[int] = None
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None
    publishedAt: Optional[str] = None


class StrapiPodcast(StrapiModel):
    id: Optional[int] = None
    documentId: str
    title: str = ""
    slug: str = ""
    description: str = ""
    audioUrl: str = ""
    duration: Optional[str] = None
    pubDate: Optional[str] = None
    coverImage: Optional[StrapiImageField] = None
    tags: Optional[List[str]] = None
    transcript: Optional[str] = None
    author: Optional[str] = None
    episodeNumber: Optional[int] = None
    season: Optional[int] = None
    featured: Optional[bool] = None
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None
    publishedAt: Optional[str] = None


StrapiComment.model_rebuild()


def parse_response(model: Any, payload: Any) -> StrapiResponse:
    """Validate a raw JSON envelope against ``StrapiResponse[model]``."""
    return StrapiResponse[model].model_validate(payload)
