import logging

from sqlmodel import SQLModel, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from .config import DATABASE_URL

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task  # noqa: F401

logger = logging.getLogger(__name__)


def _create_engine(url: str = DATABASE_URL):
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live per connection; share a single one.
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=False, **kwargs)

    # Postgres: verify pooled connections before handing them out
    return create_engine(
        url,
        echo=False,
        pool_pre_ping=True,
    )

engine = _create_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def create_tables(bind=None):
    """Create all database tables.

    Runs once at application startup; existing tables are left untouched.
    """
    bind = bind or engine
    logger.info("Creating tables on %s", bind.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(bind=bind)
