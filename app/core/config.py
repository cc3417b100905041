from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    """Configurações da aplicação carregadas de variáveis de ambiente."""
    
    # Configurações do servidor
    APP_NAME: str = "Blog-CMS"
    API_PREFIX: str = "/api/v1"
    DEBUG: bool = Field(default=False)
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)
    
    # Configurações do Strapi
    PUBLIC_STRAPI_URL: str = Field(default="http://localhost:1337")
    STRAPI_API_TOKEN: str = Field(default="")
    STRAPI_TIMEOUT: Optional[float] = Field(default=30.0)
    
    # Identidade de sessão anônima (equivalente ao localStorage do navegador)
    SESSION_STORE_PATH: str = Field(default=".session.json")
    
    # Paginação do site
    POSTS_PER_PAGE: int = Field(default=5)
    PROJECTS_PER_PAGE: int = Field(default=9)
    RECENT_POST_LIMIT: int = Field(default=3)
    
    # Configurações de logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: Optional[str] = Field(default="logs/app.log")
    
    class Config:
        env_file = ".env"
        case_sensitive = True


class CmsConfig(BaseModel):
    """Connection settings handed to the CMS client."""
    
    base_url: str = "http://localhost:1337"
    api_token: str = ""
    timeout: Optional[float] = 30.0
    
    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "CmsConfig":
        source = source or settings
        return cls(
            base_url=source.PUBLIC_STRAPI_URL.rstrip("/"),
            api_token=source.STRAPI_API_TOKEN,
            timeout=source.STRAPI_TIMEOUT,
        )

settings = Settings()
