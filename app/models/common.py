from typing import Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar('T')

class HealthCheck(BaseModel):
    """Modelo para verificação de saúde da API."""
    
    status: str
    version: str
    cms_url: Optional[str] = None
    
class GenericResponse(BaseModel, Generic[T]):
    """Modelo genérico para respostas da API."""
    
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None

class Image(BaseModel):
    """Imagem já normalizada, com URL absoluta."""
    
    url: str
    alt: str

class Pagination(BaseModel):
    """Metadados de paginação devolvidos pelo CMS."""
    
    page: int
    page_size: int
    page_count: int
    total: int
