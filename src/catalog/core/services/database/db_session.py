"""Database engine and session factory used across the application."""

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlmodel import Session, SQLModel, create_engine

from src.catalog.runtime.config.config_data import DatabaseConfig
from src.catalog.runtime.context import get_config


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None):
        """Initialize the shared database engine and session factory."""
        main_config = get_config()
        db_config = db_config or main_config.database

        logger.info(
            "Configuring database engine for environment: {}", main_config.app.environment
        )
        engine_kwargs = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(db_config),
        }

        if db_config.is_memory:
            # A single shared connection keeps the in-memory database alive
            engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                {
                    "pool_pre_ping": True,
                    "pool_recycle": db_config.pool_recycle,
                }
            )
            if not db_config.is_sqlite:
                engine_kwargs.update(
                    {
                        "pool_size": db_config.pool_size,
                        "max_overflow": db_config.max_overflow,
                        "pool_timeout": db_config.pool_timeout,
                    }
                )

        self._engine = create_engine(db_config.url, **engine_kwargs)
        logger.info("Database engine initialized for {}", self._engine.url.render_as_string())

        if db_config.is_sqlite and main_config.app.environment == "production":
            logger.warning(
                "SQLite is not recommended for production use. "
                "Consider PostgreSQL for better performance and reliability."
            )

    @staticmethod
    def _get_connect_args(db_config: DatabaseConfig) -> dict:
        if db_config.is_sqlite:
            return {"check_same_thread": False, "timeout": 20}
        return {}

    @property
    def engine(self):
        return self._engine

    def create_all(self) -> None:
        """Create all database tables."""
        from src.catalog.entities.book import BookTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(self._engine, autoflush=True)

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error("Database health check failed: {}: {}", type(e).__name__, e)
            return False

    def dispose(self) -> None:
        self._engine.dispose()
