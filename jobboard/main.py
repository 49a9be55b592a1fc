"""
University Job Board - Student Dashboard API

FastAPI backend with:
- PostgreSQL for jobs, profiles, applications and saved jobs
- JWT bearer authentication (tokens issued by the account service)
- Relevance ranking and deadline calendar for students

Run: uvicorn jobboard.main:app --reload
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from jobboard import __version__
from jobboard.api.routes import api_router
from jobboard.core.config import get_settings
from jobboard.core.logging import get_logger
from jobboard.db.postgres import test_postgres_connection

settings = get_settings()
log = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="University Job Board",
    description="""
    Student dashboard for the university job board.

    ## Features
    - **For You**: Postings ranked against the student's preferences
    - **Browse**: Active postings with search, job type, industry and location filters
    - **Saved**: Bookmarked postings
    - **Deadlines**: Saved postings due within a week, with a 5-week calendar
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Storage failures become a 503 instead of a bare 500."""
    log.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=503,
        content={"detail": "Job board data is temporarily unavailable", "success": False}
    )


@app.on_event("startup")
async def startup_event():
    log.info("University Job Board API %s starting", __version__)


@app.get("/", tags=["Health"])
async def root():
    return {"status": "healthy", "app": "University Job Board"}


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "postgres": "connected" if test_postgres_connection() else "disconnected"
    }
