import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from hedera_recon.api.dashboard import router as dashboard_router
from hedera_recon.api.errors import FilterValidationError, error_response
from hedera_recon.api.health import router as health_router
from hedera_recon.api.hgraph import router as hgraph_router
from hedera_recon.api.transactions import router as transactions_router
from hedera_recon.config import settings
from hedera_recon.reconciliation.setup import init_reconciliation_service

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    configure_logging(settings.log_level)
    init_reconciliation_service(settings)
    logger.info(f"{settings.app_name} {settings.version} started")
    yield
    # Shutdown
    logger.info(f"{settings.app_name} stopped")


app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(transactions_router)
app.include_router(hgraph_router)
app.include_router(health_router)
app.include_router(dashboard_router)


@app.exception_handler(FilterValidationError)
async def filter_validation_handler(request: Request, exc: FilterValidationError):
    return error_response(400, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(400, "Invalid parameters", message=str(exc.errors()))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return error_response(
            404,
            "Not found",
            message=f"Route {request.method} {request.url.path} not found",
        )
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    message = str(exc) if settings.debug else "Something went wrong"
    return error_response(500, "Internal server error", message=message)
