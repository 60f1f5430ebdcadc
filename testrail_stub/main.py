"""TestRail stub FastAPI application with lifespan management and CLI."""

import os
from contextlib import asynccontextmanager
from typing import Optional

import structlog
import typer
import uvicorn
from fastapi import FastAPI

from testrail_stub.config import StubConfig, get_config
from testrail_stub.endpoints import api, failure, health
from testrail_stub.logging_config import setup_logging
from testrail_stub.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from testrail_stub.state import ServerState


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager for startup and shutdown."""
    config: StubConfig = app.state.config
    logger = structlog.get_logger("testrail_stub.startup")

    logger.info(
        "TestRail stub starting up",
        config={
            "host": config.host,
            "port": config.port,
            "email": config.email,
            "seed_data": config.seed_data,
            "log_level": config.log_level,
            "log_format": config.log_format,
        },
    )

    yield

    logger.info("TestRail stub shutting down", records=app.state.server_state.store.counts())


def create_app(config: Optional[StubConfig] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    State is attached here rather than in the lifespan so that transports
    which skip lifespan events (httpx.ASGITransport) still see it.
    """
    config = config or get_config()
    setup_logging(config.log_level, config.log_format)

    app = FastAPI(
        title="TestRail Stub",
        description="An in-memory emulation of the TestRail API v2 for client tests",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if config.enable_docs else None,
        redoc_url="/redoc" if config.enable_docs else None,
    )

    app.state.config = config
    app.state.server_state = ServerState(email=config.email, seed_data=config.seed_data)

    # Error handling is added last so it wraps the logging middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(ErrorHandlingMiddleware)

    app.include_router(api.router)
    app.include_router(failure.router)
    app.include_router(health.router)

    return app


app = create_app()


# CLI interface using Typer
cli = typer.Typer(name="testrail-stub", help="Local TestRail API stub")


@cli.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Host to bind to"),
    port: int = typer.Option(8000, help="Port to bind to"),
    email: Optional[str] = typer.Option(None, help="User email accepted by the stub"),
    api_key: Optional[str] = typer.Option(None, help="Password or API key accepted by the stub"),
    seed_data: Optional[bool] = typer.Option(None, help="Create demo data at startup"),
    log_level: Optional[str] = typer.Option(None, help="Log level (DEBUG, INFO, WARNING, ERROR)"),
    log_format: Optional[str] = typer.Option(None, help="Log format (json, console)"),
    reload: bool = typer.Option(False, help="Enable auto-reload for development"),
):
    """Start the TestRail stub server."""

    # Override environment config with CLI arguments if provided
    if email is not None:
        os.environ["TESTRAIL_STUB_EMAIL"] = email
    if api_key is not None:
        os.environ["TESTRAIL_STUB_API_KEY"] = api_key
    if seed_data is not None:
        os.environ["TESTRAIL_STUB_SEED_DATA"] = str(seed_data).lower()
    if log_level is not None:
        os.environ["TESTRAIL_STUB_LOG_LEVEL"] = log_level
    if log_format is not None:
        os.environ["TESTRAIL_STUB_LOG_FORMAT"] = log_format

    os.environ["TESTRAIL_STUB_HOST"] = host
    os.environ["TESTRAIL_STUB_PORT"] = str(port)

    # Single worker: the data lives in process memory
    uvicorn.run(
        "testrail_stub.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info",
        access_log=False,
    )


@cli.command()
def config_info():
    """Display current configuration."""
    config = get_config()

    typer.echo("Current TestRail Stub Configuration:")
    typer.echo(f"  Host: {config.host}")
    typer.echo(f"  Port: {config.port}")
    typer.echo(f"  Email: {config.email}")
    typer.echo(f"  API Key: {config.api_key}")
    typer.echo(f"  Seed Data: {config.seed_data}")
    typer.echo(f"  Log Level: {config.log_level}")
    typer.echo(f"  Log Format: {config.log_format}")
    typer.echo(f"  Enable Docs: {config.enable_docs}")


if __name__ == "__main__":
    cli()
