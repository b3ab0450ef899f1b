from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session


@contextmanager
def transactional(session: Session) -> Iterator[Session]:
    """Run the enclosed block as one unit of work on ``session``.

    Commits when the block finishes, rolls back and re-raises on any error.
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores ``FOREIGN KEY`` clauses unless the pragma is set per
    connection.
    """

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
