# archivo/main.py
import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from archivo.config.settings import settings
from archivo.config.database import init_db
from archivo.core.middleware import setup_middleware
from archivo.core.exceptions import register_exception_handlers
from archivo.api.router import api_router

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Archivo API iniciando...")
    logger.info(f"Version: {settings.version}")
    logger.info(f"Environment: {'Development' if settings.debug else 'Production'}")
    logger.info(f"Database: {settings.database_url.split('@')[1] if '@' in settings.database_url else settings.database_url}")
    init_db()

    yield

    # Shutdown
    logger.info("Archivo API detenida")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description="Sistema de control de expedientes: registro, turnado, trámite y conclusión",
        docs_url="/docs",
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan
    )

    setup_middleware(app)
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        return {
            "message": "Archivo API - Control de expedientes",
            "version": settings.version,
            "status": "running",
            "environment": "production" if not settings.debug else "development",
            "docs": "/docs"
        }

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "version": settings.version,
            "app": settings.app_name,
            "environment": "production" if not settings.debug else "development"
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "archivo.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
