import logging
import os
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

import config
import fact_checker
from errors import FactCheckError, InvalidInputError
from gemini_client import GeminiClient
from observability import setup_logging
from schemas import FactCheckRequest, Verdict

setup_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)


# --- App Lifespan ---
# one httpx.AsyncClient / GeminiClient per process, closed on shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("API Key loaded: %s", "Yes" if config.GEMINI_API_KEY else "No")
    async with httpx.AsyncClient(timeout=config.GEMINI_TIMEOUT_SECONDS) as client:
        app.state.gemini = GeminiClient(
            api_key=config.GEMINI_API_KEY,
            model=config.GEMINI_MODEL,
            http_client=client,
            base_url=config.GEMINI_API_BASE,
        )
        yield


app = FastAPI(title="Fact Checker API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Dependency Injection ---
def get_gemini_client(request: Request) -> GeminiClient:
    return request.app.state.gemini


# --- Error Handlers ---
@app.exception_handler(FactCheckError)
async def fact_check_error_handler(request: Request, exc: FactCheckError):
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # bad JSON / wrong field types get the same {"error": ...} shape as missing fields
    logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
    error = InvalidInputError()
    return JSONResponse(status_code=error.http_status, content=error.to_response())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # framework errors (undecodable body, 404, 405) keep the {"error": ...} shape
    if exc.status_code == 400:
        logger.warning("Unreadable body on %s: %s", request.url.path, exc.detail)
        content = InvalidInputError().to_response()
    else:
        content = {"error": str(exc.detail)}
    return JSONResponse(
        status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None)
    )


# ------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------
@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/api/check-fact", response_model=Verdict)
async def check_fact(
    body: FactCheckRequest,
    gemini: GeminiClient = Depends(get_gemini_client),
):
    """Upstream JSON is returned as-is (no response_model re-validation)."""
    result = await fact_checker.check_fact(gemini, body)
    return JSONResponse(content=result)


# static front-end (mounted last so /api routes win)
if os.path.isdir(config.STATIC_DIR):
    app.mount("/", StaticFiles(directory=config.STATIC_DIR, html=True), name="static")


if __name__ == "__main__":
    logger.info("Server listening on http://localhost:%s", config.PORT)
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
