from fastapi import APIRouter
from app.api.routes.health import router as health_router
from app.api.routes.blog import router as blog_router
from app.api.routes.project import router as project_router
from app.api.routes.podcast import router as podcast_router
from app.api.routes.interaction import router as interaction_router

router = APIRouter()

router.include_router(health_router, prefix="/health", tags=["health"])
router.include_router(blog_router, prefix="/blog", tags=["blog"])
router.include_router(project_router, prefix="/projects", tags=["projects"])
router.include_router(podcast_router, prefix="/podcasts", tags=["podcasts"])
router.include_router(interaction_router, prefix="/interactions", tags=["interactions"])
