from fastapi import APIRouter, Depends, HTTPException
from typing import List

from app.api.dependencies import get_content_service
from app.models.podcast import Podcast
from app.services.content_service import ContentService

router = APIRouter()

@router.get("/", response_model=List[Podcast])
async def get_all_podcasts(service: ContentService = Depends(get_content_service)):
    """Get all podcast episodes, newest first"""
    return await service.get_all_podcasts()

@router.get("/featured", response_model=List[Podcast])
async def get_featured_podcasts(service: ContentService = Depends(get_content_service)):
    """Get featured podcast episodes"""
    return await service.get_featured_podcasts()

@router.get("/{slug}", response_model=Podcast)
async def get_podcast(slug: str, service: ContentService = Depends(get_content_service)):
    """Get a specific podcast episode by slug"""
    podcast = await service.get_podcast_by_slug(slug)
    if not podcast:
        raise HTTPException(status_code=404, detail="Podcast not found")
    return podcast
