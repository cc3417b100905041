from enum import Enum
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel

from app.models.common import Image, Pagination


class ProjectStatus(str, Enum):
    PLANNING = "planning"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    MAINTENANCE = "maintenance"


class Project(BaseModel):
    """Modelo para representar um projeto do portfólio."""
    
    id: str
    slug: str
    title: str
    description: str = ""
    body: Optional[str] = None
    technologies: List[str] = []
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    featured: bool = False
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    image: Optional[Image] = None
    gallery: List[Image] = []
    tags: List[str] = []
    status: Optional[ProjectStatus] = None
    order: Optional[int] = None


class PaginatedProjects(BaseModel):
    projects: List[Project]
    pagination: Optional[Pagination] = None
