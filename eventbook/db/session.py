from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from eventbook.core.config import settings


def _engine_kwargs(url: str) -> dict:
    # SQLite connections are handed between FastAPI's threadpool workers.
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


# The engine is the entry point to the database. It's configured with the
# database URL and handles the connection pooling.
engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))

# SessionLocal is a factory for creating new Session objects, one per request.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        # Always close the session, even if the endpoint raised.
        db.close()
