from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.requests import Request
from roadrunners.api.permit_routes import router as permit_router
from roadrunners.api.upload_routes import router as upload_router
from roadrunners.api.auth_routes import router as auth_router
from roadrunners.api.catalog_routes import router as catalog_router
from roadrunners.api.audit_routes import router as audit_router
from contextlib import asynccontextmanager
from roadrunners.database.connection import init_db
from roadrunners.core.config import settings, describe_settings
from roadrunners.services.storage_service import get_storage_service
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException
from fastapi.responses import JSONResponse
import logging
import traceback

logging.basicConfig(level=settings.LOG_LEVEL)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Adds security headers to every non-preflight response.

    OPTIONS requests are left alone so CORSMiddleware can answer preflights
    with its own Access-Control-* headers.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        if request.method != "OPTIONS":
            response.headers["X-Content-Type-Options"] = "nosniff"
            response.headers["X-Frame-Options"] = "DENY"
            response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
            # The pit-stop finder reads location in the browser, not through the API
            response.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting with settings: {describe_settings()}")
    await init_db()
    # Best effort: the bucket may already exist or be managed elsewhere
    try:
        await get_storage_service().ensure_bucket()
    except Exception as e:
        logger.warning(f"Could not verify storage bucket {settings.PERMITS_BUCKET}: {e}")
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Expedition catalog, permit applications and admin review",
    version="1.0.0",
    lifespan=lifespan
)


# Global exception handlers to return structured JSON and log tracebacks
logger = logging.getLogger("server_exception_handler")


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    body = {
        "error": {
            "code": getattr(exc, 'detail', 'http_error'),
            "message": str(exc.detail) if exc.detail else exc.status_code,
            "status_code": exc.status_code
        }
    }
    logger.warning(f"HTTPException handled: {exc.status_code} {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = {
        "error": {
            "code": "validation_error",
            "message": "Request validation failed",
            "details": exc.errors()
        }
    }
    logger.warning(f"Validation error on {request.url.path}")
    # errors() may carry non-JSON values (e.g. exception objects in ctx)
    return JSONResponse(status_code=422, content=_json_safe(body))


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exc()
    logger.error(f"Unhandled exception: {str(exc)}\n{tb}")
    body = {
        "error": {
            "code": "internal_server_error",
            "message": "An unexpected error occurred",
            "status_code": 500
        }
    }
    return JSONResponse(status_code=500, content=body)


def _json_safe(value):
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


# Support comma-separated CLIENT_URL values (e.g. "http://localhost:5173,https://roadrunners.example")
raw_origins = settings.CLIENT_URL or ""
allowed_origins = [o.strip() for o in raw_origins.split(",") if o.strip()]

logger.info(f"CORS allowed origins: {allowed_origins}")

# Middleware runs LIFO: CORSMiddleware is added last so it sees preflights first
app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Authorization",
        "Accept",
        "Origin",
        "Accept-Language",
        "Content-Language",
        "X-Requested-With",
        # End-user session token, separate from the gateway Authorization header
        settings.USER_TOKEN_HEADER,
    ],
    expose_headers=["Content-Type"],
    max_age=3600,
)

# Include routers
app.include_router(permit_router, prefix=settings.API_PREFIX)
app.include_router(upload_router, prefix=settings.API_PREFIX)
app.include_router(auth_router, prefix=settings.API_PREFIX)
app.include_router(catalog_router, prefix=settings.API_PREFIX)
app.include_router(audit_router, prefix=settings.API_PREFIX)


@app.get(f"{settings.API_PREFIX}/health")
async def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("roadrunners.main:app", host="0.0.0.0", port=8000, reload=True)
