"""
Database engine, session factory and the FastAPI session dependency
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from gms.core.config import settings

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # drop stale MySQL connections
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a session for the duration of one request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
