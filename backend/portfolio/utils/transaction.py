import logging
from contextlib import contextmanager
from portfolio.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional(session=None):
    """
    Unit of work around a gateway write: commit when the block succeeds,
    roll back and re-raise otherwise.
    """
    session = session or db.session
    try:
        yield session
        session.commit()
    except Exception as exc:
        logger.debug("Rolling back transaction: %s", exc)
        session.rollback()
        raise
