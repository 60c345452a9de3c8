"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
or:       python -m api.main   (binds HOST:PORT, 0.0.0.0:3030 by default)
"""
import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.dependencies import get_store
from api.routes import aggregations, books
from services.seed import seed_store
from settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# Create app
app = FastAPI(
    title="Bookstore API",
    description="CRUD over a book collection plus author and year groupings",
    version="0.1.0",
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure properly for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(books.router, prefix="/api/books", tags=["books"])
app.include_router(aggregations.router, tags=["aggregations"])


@app.exception_handler(RequestValidationError)
async def invalid_request_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies as 400 rather than FastAPI's default 422."""
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "Invalid request"})


@app.on_event("startup")
def startup_event():
    """Seed the collection on startup when enabled."""
    if settings.SEED_DATA:
        seed_store(get_store(), settings.SEED_FILE)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Bookstore API"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
