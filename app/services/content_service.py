from typing import List, Optional

from loguru import logger

from app.core.config import settings
from app.core.errors import fail_soft
from app.models.blog import BlogPost, PaginatedBlogPosts
from app.models.common import Pagination
from app.models.podcast import Podcast
from app.models.project import PaginatedProjects, Project
from app.models.strapi import StrapiBlogPost, StrapiPagination, StrapiPodcast, StrapiProject, parse_response
from app.services.normalizers import normalize_blog_post, normalize_podcast, normalize_project
from app.services.strapi_client import StrapiClient, StrapiQuery


def _pagination(meta: Optional[StrapiPagination]) -> Optional[Pagination]:
    if meta is None:
        return None
    return Pagination(
        page=meta.page,
        page_size=meta.pageSize,
        page_count=meta.pageCount,
        total=meta.total,
    )


class ContentService:
    """Read-only access to blog posts, projects and podcasts."""

    def __init__(self, client: StrapiClient):
        self.client = client
        self.base_url = client.base_url

    async def _fetch_posts(self, query: StrapiQuery):
        payload = await self.client.request("/blog-posts", params=query)
        return parse_response(List[StrapiBlogPost], payload)

    async def _fetch_projects(self, query: StrapiQuery):
        payload = await self.client.request("/projects", params=query)
        return parse_response(List[StrapiProject], payload)

    async def _fetch_podcasts(self, query: StrapiQuery):
        payload = await self.client.request("/podcasts", params=query)
        return parse_response(List[StrapiPodcast], payload)

    # ==================== BLOG ====================

    @fail_soft(list, "Error fetching blog posts from Strapi")
    async def get_all_blog_posts(self) -> List[BlogPost]:
        """Published (non-draft) posts, newest first."""
        query = StrapiQuery().populate().sort("pubDate:desc").eq("draft", False)
        response = await self._fetch_posts(query)
        return [normalize_blog_post(self.base_url, p) for p in response.data]

    @fail_soft(lambda: None, "Error fetching blog post with slug {0!r}")
    async def get_blog_post_by_slug(self, slug: str) -> Optional[BlogPost]:
        query = StrapiQuery().populate().eq("slug", slug)
        response = await self._fetch_posts(query)
        if not response.data:
            logger.info(f"Post não encontrado: {slug}")
            return None
        return normalize_blog_post(self.base_url, response.data[0])

    @fail_soft(list, "Error fetching blog posts with tag {0!r}")
    async def get_blog_posts_by_tag(self, tag: str) -> List[BlogPost]:
        query = (
            StrapiQuery()
            .populate()
            .contains("tags", tag)
            .eq("draft", False)
            .sort("pubDate:desc")
        )
        response = await self._fetch_posts(query)
        return [normalize_blog_post(self.base_url, p) for p in response.data]

    async def get_tag_names(self) -> List[str]:
        """Sorted set of every tag used by a published post."""
        posts = await self.get_all_blog_posts()
        return sorted({tag for post in posts for tag in post.tags})

    @fail_soft(lambda: PaginatedBlogPosts(posts=[]), "Error fetching paginated blog posts")
    async def get_paginated_blog_posts(self, page: int = 1, page_size: Optional[int] = None) -> PaginatedBlogPosts:
        page_size = page_size or settings.POSTS_PER_PAGE
        query = (
            StrapiQuery()
            .populate()
            .paginate(page, page_size)
            .eq("draft", False)
            .sort("pubDate:desc")
        )
        response = await self._fetch_posts(query)
        return PaginatedBlogPosts(
            posts=[normalize_blog_post(self.base_url, p) for p in response.data],
            pagination=_pagination(response.meta.pagination),
        )

    async def get_recent_blog_posts(self, limit: Optional[int] = None) -> List[BlogPost]:
        posts = await self.get_all_blog_posts()
        return posts[: limit or settings.RECENT_POST_LIMIT]

    # ==================== PROJECTS ====================

    @fail_soft(list, "Error fetching projects from Strapi")
    async def get_all_projects(self) -> List[Project]:
        query = StrapiQuery().populate().sort("order:asc", "createdAt:desc")
        response = await self._fetch_projects(query)
        return [normalize_project(self.base_url, p) for p in response.data]

    @fail_soft(list, "Error fetching featured projects")
    async def get_featured_projects(self) -> List[Project]:
        query = StrapiQuery().populate().eq("featured", True).sort("order:asc")
        response = await self._fetch_projects(query)
        return [normalize_project(self.base_url, p) for p in response.data]

    @fail_soft(lambda: None, "Error fetching project with slug {0!r}")
    async def get_project_by_slug(self, slug: str) -> Optional[Project]:
        query = StrapiQuery().populate().eq("slug", slug)
        response = await self._fetch_projects(query)
        if not response.data:
            logger.info(f"Projeto não encontrado: {slug}")
            return None
        return normalize_project(self.base_url, response.data[0])

    @fail_soft(lambda: PaginatedProjects(projects=[]), "Error fetching paginated projects")
    async def get_paginated_projects(self, page: int = 1, page_size: Optional[int] = None) -> PaginatedProjects:
        page_size = page_size or settings.PROJECTS_PER_PAGE
        query = (
            StrapiQuery()
            .populate()
            .paginate(page, page_size)
            .sort("order:asc", "createdAt:desc")
        )
        response = await self._fetch_projects(query)
        return PaginatedProjects(
            projects=[normalize_project(self.base_url, p) for p in response.data],
            pagination=_pagination(response.meta.pagination),
        )

    # ==================== PODCASTS ====================

    @fail_soft(list, "Error fetching podcasts from Strapi")
    async def get_all_podcasts(self) -> List[Podcast]:
        query = StrapiQuery().populate().sort("pubDate:desc")
        response = await self._fetch_podcasts(query)
        return [normalize_podcast(self.base_url, p) for p in response.data]

    @fail_soft(lambda: None, "Error fetching podcast {0!r}")
    async def get_podcast_by_slug(self, slug: str) -> Optional[Podcast]:
        query = StrapiQuery().populate().eq("slug", slug)
        response = await self._fetch_podcasts(query)
        if not response.data:
            return None
        return normalize_podcast(self.base_url, response.data[0])

    @fail_soft(list, "Error fetching featured podcasts")
    async def get_featured_podcasts(self) -> List[Podcast]:
        query = StrapiQuery().populate().eq("featured", True).sort("pubDate:desc")
        response = await self._fetch_podcasts(query)
        return [normalize_podcast(self.base_url, p) for p in response.data]
