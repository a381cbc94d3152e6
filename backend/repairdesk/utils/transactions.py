import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

log = logging.getLogger("repairdesk.db")


@contextmanager
def smart_transaction(session: Session) -> Iterator[Session]:
    """
    Run the block as one unit of work on ``session``: commit when it exits
    cleanly, roll back everything it wrote when it raises.
    Reads issued before the block (autobegin) are folded into the same transaction,
    so check-then-write sequences inside a service call commit or fail together.
    Usage:
        with smart_transaction(db):
            ... DB work ...
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        log.debug("transaction rolled back", exc_info=True)
        raise
