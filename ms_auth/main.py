"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

import logging

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from sqlalchemy.engine import Engine

from ms_auth import __version__
from ms_auth.api.errors import register_error_handlers
from ms_auth.api.middleware import register_middleware
from ms_auth.api.v1 import router as v1_router
from ms_auth.core.config import Settings, get_settings
from ms_auth.core.database import create_db_engine, create_session_factory
from ms_auth.services.auth import AuthService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """
    Build the app. Settings, engine and the auth service are created once here
    and shared by every request through app.state.
    """
    settings = settings or get_settings()
    engine = engine or create_db_engine(settings)
    session_factory = create_session_factory(engine)

    app = FastAPI(
        title="Auth API",
        version=__version__,
        docs_url=f"{settings.API_PREFIX}/api-docs",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.auth_service = AuthService.from_settings(settings, session_factory)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Authorization"],
    )
    register_middleware(app)
    register_error_handlers(app, expose_details=settings.is_dev)

    app.include_router(v1_router, prefix=settings.API_PREFIX)

    @app.get("/", include_in_schema=False)
    def root() -> RedirectResponse:
        return RedirectResponse(url=f"{settings.API_PREFIX}/")

    logger.info("Auth API configured: env=%s prefix=%s", settings.APP_ENV, settings.API_PREFIX)
    return app


def main() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    main()
