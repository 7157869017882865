from contextlib import contextmanager

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageError
from ..extensions import db


@contextmanager
def storage_guard(action: str):
    """Turn any SQLAlchemy failure inside the block into a StorageError.

    The session is rolled back first so the request can still answer.
    Domain errors raised inside the block pass through untouched.
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception('%s failed', action)
        raise StorageError(f"{action} failed") from e
