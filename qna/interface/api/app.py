"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qna.config import Settings
from qna.interface.api.routes import (
    answers,
    comments,
    health,
    notifications,
    questions,
    realtime,
    users,
    votes,
)
from qna.interface.error import install_error_handlers
from qna.util.di.container import create_container, setup_di
from qna.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    yield
    await app_instance.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; defaults to the production container
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Q&A Forum API",
        description="Backend API for a question and answer forum with votes and reputation",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        max_age=settings.api.cors_max_age,
    )

    setup_di(app_instance, container or create_container())

    install_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(realtime.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
