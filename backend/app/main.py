"""
FastAPI entrypoint for the finance tracker backend.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.exceptions import AppError, ValidationError
from app.core.utils import format_error
from app.api.router import api_router
from app.services.auth_service import validate_authorization
from app.db.session import init_db

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

PROTECTED_PREFIX = "/api/transactions"


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(
    title="Finance Tracker API",
    description="Backend API for personal income and expense tracking",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware; also answers preflight OPTIONS before any auth check
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Render domain errors as ``{"error": message}`` with their fixed status."""
    return JSONResponse(status_code=exc.status_code, content=format_error(exc.message))


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Malformed request shapes are client errors, reported as 400.
    Protected routes still answer 401 first when the token is missing or bad,
    since FastAPI decodes the body before running route dependencies.
    """
    if request.url.path.startswith(PROTECTED_PREFIX):
        try:
            validate_authorization(request.headers.get("authorization"))
        except AppError as auth_error:
            return await app_error_handler(request, auth_error)
    logger.debug(f"Rejected request to {request.url.path}: {exc.errors()}")
    error = ValidationError("Invalid request")
    return JSONResponse(
        status_code=error.status_code,
        content=format_error(error.message, details=jsonable_errors(exc))
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Finance Tracker API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
