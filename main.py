from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from routes import methods, tasks
from database import create_db_and_tables
from errors import TaskError
from schemas import ApiResponse, ErrorDetail
from utils.logging_setup import setup_logging
import logging
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()
setup_logging()

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Shared Task List API",
    description="Multi-user task list where only a task's owner may change or remove it",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS configuration
cors_origins = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(tasks.router, prefix="/api", tags=["tasks"])
app.include_router(methods.router, prefix="/api", tags=["methods"])


@app.exception_handler(TaskError)
async def task_error_handler(request: Request, exc: TaskError):
    """Render service errors in the ApiResponse envelope"""
    logger.info("%s %s failed: %s", request.method, request.url.path, exc)
    body = ApiResponse(
        success=False,
        error=ErrorDetail(code=exc.code, message=exc.message)
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.on_event("startup")
def on_startup():
    """Create database tables on startup"""
    create_db_and_tables()


@app.get("/")
def read_root():
    """Root endpoint"""
    return {
        "message": "Shared Task List API is running",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}
