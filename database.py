from sqlmodel import create_engine, SQLModel, Session
from fastapi import Depends
import logging
import os
from dotenv import load_dotenv
from repository import TaskRepository
from services.tasks import TaskService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

if not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is not set")

# SQLite connections are shared with FastAPI's threadpool
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# Create engine
engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)


def create_db_and_tables():
    """Create all tables in the database"""
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready")


def get_session():
    """Get database session - used as FastAPI dependency"""
    with Session(engine) as session:
        yield session


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    """Task service bound to the request's session - used as FastAPI dependency"""
    return TaskService(TaskRepository(session))
