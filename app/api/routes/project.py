from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from app.api.dependencies import get_content_service
from app.models.project import PaginatedProjects, Project
from app.services.content_service import ContentService

router = APIRouter()

@router.get("/", response_model=List[Project])
async def get_all_projects(service: ContentService = Depends(get_content_service)):
    """Get all projects ordered by their sort key"""
    return await service.get_all_projects()

@router.get("/featured", response_model=List[Project])
async def get_featured_projects(service: ContentService = Depends(get_content_service)):
    """Get featured projects"""
    return await service.get_featured_projects()

@router.get("/page", response_model=PaginatedProjects)
async def get_paginated_projects(
    page: int = Query(1, ge=1, description="Page number"),
    page_size: Optional[int] = Query(None, ge=1, le=100, description="Projects per page"),
    service: ContentService = Depends(get_content_service),
):
    """Get one page of projects"""
    return await service.get_paginated_projects(page, page_size)

@router.get("/{slug}", response_model=Project)
async def get_project(slug: str, service: ContentService = Depends(get_content_service)):
    """Get a specific project by slug"""
    project = await service.get_project_by_slug(slug)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project
