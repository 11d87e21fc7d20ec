"""Database initialization script."""

from src.catalog.core.services.database.db_session import DbSessionService


def init_db(database_service: DbSessionService | None = None) -> None:
    """Create all database tables."""
    (database_service or DbSessionService()).create_all()


def main() -> None:
    init_db()


if __name__ == "__main__":
    main()
