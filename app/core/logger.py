import sys
import logging
from loguru import logger
from app.core.config import settings

class InterceptHandler(logging.Handler):
    """
    Interceptor de logs padrão do Python para usar o Loguru.
    """
    
    def emit(self, record):
        # Obter o nível correspondente do Loguru
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        
        # Encontrar o frame de origem do log
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        
        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )

def setup_logging(level: str = None, log_file: str = None):
    """Configura o sistema de logging usando Loguru."""
    
    level = level or settings.LOG_LEVEL
    log_file = log_file if log_file is not None else settings.LOG_FILE
    
    logger.remove()
    
    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )
    
    # Arquivo de log opcional (LOG_FILE vazio desativa)
    if log_file:
        logger.add(
            log_file,
            rotation="10 MB",
            retention="1 week",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=level,
        )
    
    # Interceptar logs padrão do Python
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    
    # httpx registra cada requisição ao CMS em INFO
    for logger_name in ("uvicorn", "uvicorn.error", "fastapi", "httpx"):
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [InterceptHandler()]
    
    logger.info("Sistema de logging configurado com sucesso")
    
    return logger
