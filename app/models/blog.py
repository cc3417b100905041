from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from app.models.common import Image, Pagination

class BlogPost(BaseModel):
    """Modelo para representar um post do blog."""
    
    id: str
    slug: str
    title: str
    description: str = ""
    pub_date: Optional[datetime] = None
    author: Optional[str] = None
    tags: List[str] = []
    draft: bool = False
    body: Optional[str] = None
    image: Optional[Image] = None
    comments_count: int = 0
    likes_count: int = 0

class PaginatedBlogPosts(BaseModel):
    """Uma página de posts com os metadados do CMS."""
    
    posts: List[BlogPost]
    pagination: Optional[Pagination] = None

class Tag(BaseModel):
    """Tag com seu identificador em formato slug."""
    
    name: str
    id: str = Field(..., description="Slug derivado do nome")
