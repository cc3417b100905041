from fastapi import APIRouter, Depends
from app.api.dependencies import get_cms_config
from app.core.config import CmsConfig
from app.models.common import HealthCheck

router = APIRouter()

@router.get(
    "/",
    response_model=HealthCheck,
    summary="Verificação de saúde",
    description="Verifica se a API está funcionando corretamente."
)
async def health_check(config: CmsConfig = Depends(get_cms_config)):
    """
    Endpoint para verificar a saúde da API.
    
    Returns:
        HealthCheck: Status da API e o CMS configurado.
    """
    return HealthCheck(status="ok", version="1.0.0", cms_url=config.base_url)
