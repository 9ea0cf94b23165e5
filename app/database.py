from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from app.config import settings
from app.core.exceptions import PersistenceException
from app.logging_config import get_logger

logger = get_logger(__name__)

# SQLite uses a single-connection pool that rejects sizing arguments
if settings.is_sqlite:
    engine_options = {"connect_args": {"check_same_thread": False}}
else:
    engine_options = {
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
    }

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using
    echo=settings.DEBUG,  # Log SQL queries in debug mode
    **engine_options,
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """
    FastAPI dependency for database sessions.

    Yields a database session and ensures it's closed after use.

    Usage:
        @router.get("/{store_id}")
        def get_store(store_id: int, db: Session = Depends(get_db)):
            return StoreService(db).get_store(...)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def commit(db: Session) -> None:
    """
    Commit the session, rolling back and raising PersistenceException on failure.

    Each API write is a single commit; nothing is retried here.
    """
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Database commit failed", exc_info=True)
        raise PersistenceException("Database write failed") from exc
