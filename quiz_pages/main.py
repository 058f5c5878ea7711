import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .api.routers import pages as pages_router
from .core.config import Settings, settings as default_settings
from .core.logging import setup_logging
from .domain.errors import ContentError
from .repositories.content_repository import ContentRepository
from .services.navigation_service import NavigationService
from .services.renderer import PageRenderer

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.LOG_LEVEL)
        try:
            quiz = ContentRepository(settings.QUIZ_FILE).load()
        except ContentError as e:
            # no partial serving: startup fails and the server exits
            logger.error("Refusing to start: %s", e)
            raise
        app.state.navigation = NavigationService(quiz)
        app.state.renderer = PageRenderer(settings.TEMPLATES_DIR)
        yield

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings

    app.mount(
        "/static",
        StaticFiles(directory=settings.STATIC_DIR, check_dir=False),
        name="static",
    )
    app.include_router(pages_router.router)

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=default_settings.HOST, port=default_settings.BACKEND_PORT)
