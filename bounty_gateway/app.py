"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from bounty_gateway.config import Config
from bounty_gateway.datasources import GnoDataSource, RealmDataSource
from bounty_gateway.errors import GatewayError
from bounty_gateway.api import router
from bounty_gateway.api.dependencies import set_datasource

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS, PUT, DELETE",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def create_app(
    config: Config | None = None,
    datasource: RealmDataSource | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Application configuration. If None, loads from environment.
        datasource: Realm data source. If None, a GnoDataSource is built from config.

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = Config.from_env()

    if datasource is None:
        datasource = GnoDataSource(
            rpc_url=config.gno_rpc_url,
            realm_path=config.realm_path,
            timeout=config.request_timeout,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        # Startup
        logger.info("Starting GnoBounty gateway")
        logger.info(f"Using Gno RPC: {config.gno_rpc_url}")
        logger.info(f"Querying realm: {config.realm_path}")

        set_datasource(datasource)

        yield

        # Shutdown
        logger.info("Shutting down...")
        await datasource.close()

    app = FastAPI(
        title="GnoBounty Gateway",
        description="Read-only JSON API over the GnoBounty realm",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Permissive CORS; preflight requests on any path get an empty 200
    @app.middleware("http")
    async def cors(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            try:
                response = await call_next(request)
            except Exception as e:
                logger.exception(f"Unhandled error on {request.method} {request.url.path}: {e}")
                response = PlainTextResponse("internal server error", status_code=500)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return PlainTextResponse(str(exc), status_code=exc.status_code)

    # Include API routes
    app.include_router(router)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app
