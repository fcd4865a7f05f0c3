import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from access_copilot import __version__, config
from access_copilot.api.middleware import BodySizeLimitMiddleware
from access_copilot.api.routes import router
from access_copilot.errors import CopilotError
from access_copilot.inference.config import build_llm_client

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not config.OPENAI_API_KEY:
        logger.warning(
            "OPENAI_API_KEY is not set. Start the server with: "
            'OPENAI_API_KEY="sk-..." python -m access_copilot.main'
        )

    # One client for the whole process; never rebuilt per request.
    app.state.llm_client = build_llm_client()
    logger.info(
        "Patient Access AI server listening on http://localhost:%s (model=%s)",
        config.PORT,
        config.TEXT_MODEL,
    )
    yield


app = FastAPI(
    title="Patient Access Co-Pilot",
    version=__version__,
    lifespan=lifespan,
)

# Middleware FIRST
app.add_middleware(BodySizeLimitMiddleware, max_bytes=config.MAX_BODY_BYTES)


# Outermost, so 413 responses carry CORS headers too.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CopilotError)
async def copilot_error_handler(request: Request, exc: CopilotError):
    return error_response(exc.status_code, exc.public_message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.debug("Rejected request body: %s", exc.errors())
    return error_response(400, "Invalid request body.")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "Failed to generate analysis.")


# Routes AFTER middleware
app.include_router(router)

# UI assets last so API routes win over the catch-all mount.
if os.path.isdir(config.STATIC_DIR):
    app.mount("/", StaticFiles(directory=config.STATIC_DIR, html=True), name="static")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "access_copilot.main:app",
        host="0.0.0.0",
        port=config.PORT,
    )
