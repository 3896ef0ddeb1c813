import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from estate_portal.config import DEFAULT_JWT_SECRET, settings
from estate_portal.core.exceptions import register_exception_handlers


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
    )

    register_exception_handlers(app)

    # Routers
    from estate_portal.routes.api import api_router

    app.include_router(api_router, prefix=settings.API_PREFIX)

    # Set all CORS enabled origins
    origins = {str(origin) for origin in settings.BACKEND_CORS_ORIGINS}
    origins.add(settings.FRONTEND_URL)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Health Check
    @app.get("/health")
    def health_check():
        return {"status": "ok", "version": settings.VERSION}

    if settings.JWT_SECRET == DEFAULT_JWT_SECRET:
        logging.getLogger(__name__).warning("JWT_SECRET is using the default value; set it in .env")

    return app


app = create_app()
