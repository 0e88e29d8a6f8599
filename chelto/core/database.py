"""SQLAlchemy engine, session factory and the FastAPI session dependency."""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from chelto.core import config

connect_args = {}
if config.DATABASE_URL.startswith("sqlite"):
    # request handlers run in a threadpool
    connect_args = {"check_same_thread": False}

engine = create_engine(
    config.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
