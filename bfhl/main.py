import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from structlog import get_logger

from .config import get_settings
from .exceptions import BFHLError, InternalError
from .logger import configure_logging
from .compute.router import router as compute_router
from .compute.schemas import BFHLResponse

settings = get_settings()
configure_logging(settings)
logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pooled client for all provider calls; timeouts are set per request.
    app.state.http_client = httpx.AsyncClient(timeout=None)
    logger.info("startup", app=settings.APP_NAME, ai_configured=bool(settings.AI_API_KEY))

    yield

    await app.state.http_client.aclose()


app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan,
    debug=settings.DEBUG
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


def error_response(status_code: int, message: str) -> JSONResponse:
    envelope = BFHLResponse.failure(get_settings().OFFICIAL_EMAIL, message)
    return JSONResponse(status_code=status_code, content=envelope.to_content())


# Global exception handlers
@app.exception_handler(BFHLError)
async def bfhl_exception_handler(request: Request, exc: BFHLError):
    if exc.status_code >= 500:
        logger.warning("request_failed", path=request.url.path, code=exc.code, status=exc.status_code)
    else:
        logger.info("request_rejected", path=request.url.path, code=exc.code, status=exc.status_code)
    return error_response(exc.status_code, exc.message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
    internal = InternalError()
    return error_response(internal.status_code, internal.message)


@app.get("/health")
async def health_check():
    return {"is_success": True, "official_email": settings.OFFICIAL_EMAIL, "status": "ok"}


# Include routers
app.include_router(compute_router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
