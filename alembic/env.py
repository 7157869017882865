"""Alembic environment for the evaluation schema.

The database URL and model metadata come from the Flask app in ``wsgi``,
so ``flask db`` and a bare ``alembic upgrade head`` migrate the same database.
"""
import os
import pathlib
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

# migrations own the schema; keep create_app from calling create_all
os.environ["SKIP_CREATE_ALL"] = "1"

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

config = context.config
if config.config_file_name:
    fileConfig(config.config_file_name)

from wsgi import app  # noqa: E402
from evalcenter.extensions import db  # noqa: E402


def _database_url(raw):
    """Anchor relative sqlite files in ``instance/`` like Flask-SQLAlchemy does."""
    prefix = "sqlite:///"
    if not raw or not raw.startswith(prefix) or raw.startswith("sqlite:////"):
        return raw
    instance_dir = PROJECT_ROOT / "instance"
    instance_dir.mkdir(parents=True, exist_ok=True)
    return prefix + (instance_dir / raw[len(prefix):]).as_posix()


def _load_target():
    with app.app_context():
        import evalcenter.models  # noqa: F401
        raw = os.getenv("DATABASE_URL") or app.config.get("SQLALCHEMY_DATABASE_URI")
        return _database_url(raw), db.metadata


DATABASE_URL, target_metadata = _load_target()
CONFIGURE_OPTS = {"target_metadata": target_metadata, "compare_type": True, "render_as_batch": True}


def run_offline():
    context.configure(url=DATABASE_URL, literal_binds=True, **CONFIGURE_OPTS)
    with context.begin_transaction():
        context.run_migrations()


def run_online():
    engine = engine_from_config({"sqlalchemy.url": DATABASE_URL}, prefix="sqlalchemy.", poolclass=pool.NullPool)
    with engine.connect() as connection:
        context.configure(connection=connection, **CONFIGURE_OPTS)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_offline()
else:
    run_online()
