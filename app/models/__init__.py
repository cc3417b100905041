from app.models.common import GenericResponse, HealthCheck, Image, Pagination
from app.models.blog import BlogPost, PaginatedBlogPosts, Tag
from app.models.project import PaginatedProjects, Project, ProjectStatus
from app.models.podcast import Podcast
from app.models.interaction import Comment, CommentSubmission, Like, LikeStatus, NewComment

__all__ = [
    "BlogPost",
    "Comment",
    "CommentSubmission",
    "GenericResponse",
    "HealthCheck",
    "Image",
    "Like",
    "LikeStatus",
    "NewComment",
    "PaginatedBlogPosts",
    "PaginatedProjects",
    "Pagination",
    "Podcast",
    "Project",
    "ProjectStatus",
    "Tag",
]
