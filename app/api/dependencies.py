from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header

from app.core.config import CmsConfig
from app.services.content_service import ContentService
from app.services.interaction_service import InteractionService
from app.services.strapi_client import StrapiClient


@lru_cache()
def get_cms_config() -> CmsConfig:
    return CmsConfig.from_settings()


def get_strapi_client(config: CmsConfig = Depends(get_cms_config)) -> StrapiClient:
    return StrapiClient(config)


def get_content_service(client: StrapiClient = Depends(get_strapi_client)) -> ContentService:
    return ContentService(client)


def get_interaction_service(client: StrapiClient = Depends(get_strapi_client)) -> InteractionService:
    return InteractionService(client)


def get_session_id(x_session_id: Optional[str] = Header(None)) -> str:
    """Anonymous session id sent by the browser; empty when absent."""
    return (x_session_id or "").strip()
