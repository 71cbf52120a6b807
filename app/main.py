from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, settings as default_settings
from app.core.database import create_db_engine, create_session_factory
from app.core.handlers import register_exception_handlers
from app.core.logging import setup_logging
from app.api.v1.router import api_router


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API around one engine for the process lifetime.

    The engine and session factory live on app.state; request handlers get a
    session through app.api.deps.get_db.
    """
    app_settings = app_settings or default_settings
    logger = setup_logging(app_settings.LOG_LEVEL)

    engine = create_db_engine(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"{app_settings.PROJECT_NAME} {app_settings.APP_VERSION} starting")
        yield
        engine.dispose()
        logger.info("Database engine disposed")

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        version=app_settings.APP_VERSION,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=app_settings.API_PREFIX)

    @app.get("/")
    def root():
        """
        Health check endpoint
        """
        return {
            "message": "Welcome to Student Information System API",
            "docs": "/docs",
            "version": app_settings.APP_VERSION
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=default_settings.HOST, port=default_settings.PORT)
