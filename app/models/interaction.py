from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class Comment(BaseModel):
    """
    Comentário normalizado.

    `parent_comment` é uma referência resolvida pelo `populate` do CMS e
    nunca passa de um nível.
    """
    
    id: str
    content: str
    author_name: str
    author_website: Optional[str] = None
    approved: bool = False
    created_at: Optional[datetime] = None
    parent_comment: Optional["Comment"] = None


class Like(BaseModel):
    """Curtida de uma sessão anônima; `id` é o id numérico usado no DELETE."""
    
    id: str
    session_id: str
    created_at: Optional[datetime] = None


class NewComment(BaseModel):
    """Dados enviados pelo formulário de comentário."""
    
    content: str = Field(..., min_length=1)
    author_name: str = Field(..., min_length=1)
    author_email: str = Field(..., min_length=1)
    author_website: Optional[str] = None
    blog_post_id: str
    parent_comment_id: Optional[str] = None


class LikeStatus(BaseModel):
    post_id: str
    count: int
    liked: bool = False


Comment.model_rebuild()


class CommentSubmission(BaseModel):
    """Corpo do POST de comentário; o post vem da URL."""
    
    content: str = Field(..., min_length=1)
    author_name: str = Field(..., min_length=1)
    author_email: str = Field(..., min_length=1)
    author_website: Optional[str] = None
    parent_comment_id: Optional[str] = None
