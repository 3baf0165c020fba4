from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging
import os

from slidestudio.config import settings
from slidestudio.image_providers import image_manager
from slidestudio.slide_store import SLIDES_URL_PREFIX
from slidestudio.api.health import router as health_router
from slidestudio.api.providers import router as providers_router
from slidestudio.api.slides import router as slides_router
from slidestudio.api.feedback import router as feedback_router
from slidestudio.api.composer import router as composer_router

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Slide Studio...")
    os.makedirs(settings.slides_root, exist_ok=True)

    provider_info = image_manager.get_current_provider_info()
    logger.info(f"Provider info: {provider_info}")
    if not provider_info["configured"]:
        logger.warning(f"No API key configured for {provider_info['provider']}; generation requests will fail")

    try:
        yield
    finally:
        logger.info("Shutting down Slide Studio...")

# Create FastAPI app
app = FastAPI(
    title="Slide Studio",
    description="Generates presentation slide images from slide ideas and collects review feedback",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.FRONTEND_URL,
        "http://localhost:3000",
        "http://localhost:3001",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router)
app.include_router(providers_router)
app.include_router(slides_router)
app.include_router(feedback_router)
app.include_router(composer_router)

# Generated images are served from the slides root
app.mount(
    SLIDES_URL_PREFIX,
    StaticFiles(directory=settings.slides_root, check_dir=False),
    name="generated-slides",
)

# Exception handlers, all rendered as {"error": message}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})

@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    return JSONResponse(status_code=400, content={"error": str(exc)})

@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "slidestudio.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=True,
        log_level="info"
    )
