import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from meditation_server import __version__
from meditation_server.core.config import Settings, get_settings
from meditation_server.core.log_config import configure_logging
from meditation_server.infrastructure.database.session import dispose_engine, init_db
from meditation_server.interfaces.http.routers import create_api_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.database.create_tables_on_startup:
            await init_db()
        logger.info("%s %s started (%s)", settings.project_name, __version__, settings.environment)
        yield
        await dispose_engine()

    app = FastAPI(
        title=settings.project_name,
        description="Author, store and retrieve guided-meditation scripts",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "meditation_server.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
