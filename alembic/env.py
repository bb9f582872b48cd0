from logging.config import fileConfig
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import Connection, make_url
from alembic import context
from dotenv import load_dotenv

# Load environment variables from .env file before the app config is built
load_dotenv()

# Import your models here so Alembic can detect them
from expense_tracker.core.config import Config  # noqa: E402
from expense_tracker.core.db.base import Base  # noqa: E402
from expense_tracker.modules.expenses.models import Expense  # noqa: E402,F401

# this is the Alembic Config object
config = context.config

# Alembic runs synchronously: drop the async driver from the app URL
url = make_url(Config().db_url)
db_url = url.set(drivername=url.get_backend_name()).render_as_string(hide_password=False)
config.set_main_option("sqlalchemy.url", db_url)

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# add your model's MetaData object here for 'autogenerate' support
target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connectable = create_engine(db_url, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        do_run_migrations(connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
