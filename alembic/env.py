"""Alembic migration environment; the database URL comes from app settings, never alembic.ini."""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

from app.core.config import settings
from app.models import Base, SavedMovie, User  # noqa: F401  (registers tables on Base.metadata)

config = context.config
# alembic.ini carries no logging sections; only configure logging when one is supplied that does.
if config.config_file_name is not None and config.get_section("formatters") is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit SQL to stdout without connecting."""
    context.configure(
        url=settings.DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Connect with a throwaway NullPool engine and apply migrations."""
    connectable = create_engine(settings.DATABASE_URL, poolclass=NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
