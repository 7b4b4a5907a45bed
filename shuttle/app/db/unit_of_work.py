"""Scoped session acquisition for one logical read or write."""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from shuttle.app.db.session import SessionProvider


@contextmanager
def unit_of_work(session_provider: SessionProvider) -> Iterator[Session]:
    """Yield a session whose statements commit together or not at all.

    Any exception raised inside the block rolls back every statement issued
    since the block began and is re-raised unchanged. The session is closed on
    every exit path.
    """
    db = session_provider()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
