from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from app.api.dependencies import get_content_service
from app.models.blog import BlogPost, PaginatedBlogPosts, Tag
from app.services.content_service import ContentService
from app.utils.helpers import get_all_tags

router = APIRouter()

@router.get("/", response_model=List[BlogPost])
async def get_all_blog_posts(service: ContentService = Depends(get_content_service)):
    """Get all published blog posts, newest first"""
    return await service.get_all_blog_posts()

@router.get("/page", response_model=PaginatedBlogPosts)
async def get_paginated_blog_posts(
    page: int = Query(1, ge=1, description="Page number"),
    page_size: Optional[int] = Query(None, ge=1, le=100, description="Posts per page"),
    service: ContentService = Depends(get_content_service),
):
    """Get one page of published blog posts"""
    return await service.get_paginated_blog_posts(page, page_size)

@router.get("/recent", response_model=List[BlogPost])
async def get_recent_blog_posts(
    limit: Optional[int] = Query(None, ge=1, le=20, description="Maximum number of posts"),
    service: ContentService = Depends(get_content_service),
):
    """Get the most recent blog posts"""
    return await service.get_recent_blog_posts(limit)

@router.get("/tags", response_model=List[Tag])
async def get_tags(service: ContentService = Depends(get_content_service)):
    """Get all tags used by published posts"""
    posts = await service.get_all_blog_posts()
    return get_all_tags(posts)

@router.get("/tag/{tag}", response_model=List[BlogPost])
async def get_blog_posts_by_tag(tag: str, service: ContentService = Depends(get_content_service)):
    """Get published blog posts by tag"""
    return await service.get_blog_posts_by_tag(tag)

@router.get("/{slug}", response_model=BlogPost)
async def get_blog_post(slug: str, service: ContentService = Depends(get_content_service)):
    """Get a specific blog post by slug"""
    post = await service.get_blog_post_by_slug(slug)
    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return post
