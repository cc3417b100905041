from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.api.routes import router as api_router
from app.core.logger import setup_logging

def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    
    # Configurar o logger
    setup_logging()
    
    # Criar a aplicação FastAPI
    app = FastAPI(
        title=settings.APP_NAME,
        description="API de conteúdo do blog e portfólio servida a partir do Strapi",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    
    # Configurar CORS (os widgets rodam no navegador e enviam X-Session-Id)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Em produção, especificar origens permitidas
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Incluir rotas da API
    app.include_router(api_router, prefix=settings.API_PREFIX)
    
    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "message": f"Bem-vindo à {settings.APP_NAME} API",
            "docs": "/docs",
            "version": "1.0.0"
        }
    
    return app
