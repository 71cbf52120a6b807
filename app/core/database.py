from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool
from .config import Settings
import logging

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def create_db_engine(settings: Settings) -> Engine:
    """
    Build the engine for one process lifetime.

    PostgreSQL gets a QueuePool with pre-ping; SQLite (tests, local runs) gets a
    single shared connection with foreign keys switched on.
    """
    if settings.is_sqlite:
        engine = create_engine(
            settings.DATABASE_URL,
            poolclass=StaticPool,
            echo=settings.DB_ECHO_SQL,
            connect_args={"check_same_thread": False},
        )
        event.listen(engine, "connect", set_sqlite_pragma)
        return engine

    engine = create_engine(
        settings.DATABASE_URL,

        # Connection pool settings
        poolclass=QueuePool,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,

        # Test connection before using (detect disconnects)
        pool_pre_ping=True,

        echo=settings.DB_ECHO_SQL,

        connect_args={
            "connect_timeout": settings.DB_CONNECT_TIMEOUT,
        }
    )

    if settings.DEBUG:
        event.listen(engine, "checkout", receive_checkout)
    return engine


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,  # Don't auto-commit transactions
        autoflush=False,   # Don't auto-flush before queries
        bind=engine,
        expire_on_commit=False  # Don't expire objects after commit
    )


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables(engine: Engine):
    """
    Create all database tables defined in models.

    ⚠️ WARNING: Only use this in development and tests!
    In production, use Alembic migrations instead.
    """
    # Import all models so Base.metadata knows every table
    from app.models import admin, attendance, course, enrollment, grade, semester, student  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


def drop_database_tables(engine: Engine):
    """
    Drop all database tables.

    ⚠️ DANGER: This will delete all data!
    """
    logger.warning("Dropping all database tables...")
    Base.metadata.drop_all(bind=engine)
    logger.info("Database tables dropped")


def check_database_connection(engine: Engine) -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


# =============================================================================
# EVENT LISTENERS
# =============================================================================

def set_sqlite_pragma(dbapi_conn, connection_record):
    """SQLite leaves foreign keys off unless asked per connection."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def receive_checkout(dbapi_conn, connection_record, connection_proxy):
    """
    Event listener when connection is retrieved from pool.
    """
    logger.debug("Connection checked out from pool")


# =============================================================================
# TEST DATABASE CONNECTION
# =============================================================================

if __name__ == "__main__":
    """Test database connection when running this file directly."""
    logging.basicConfig(level=logging.INFO)

    from .config import settings, print_config
    print_config()

    engine = create_db_engine(settings)
    if check_database_connection(engine):
        print("✅ Connection successful!")
    else:
        print("❌ Connection failed!")
