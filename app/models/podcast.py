from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel

from app.models.common import Image


class Podcast(BaseModel):
    """Modelo para representar um episódio de podcast."""
    
    id: str
    slug: str
    title: str
    description: str = ""
    audio_url: str = ""
    duration: Optional[str] = None
    pub_date: Optional[datetime] = None
    cover_image: Optional[Image] = None
    tags: List[str] = []
    transcript: Optional[str] = None
    author: Optional[str] = None
    episode_number: Optional[int] = None
    season: Optional[int] = None
    featured: bool = False
