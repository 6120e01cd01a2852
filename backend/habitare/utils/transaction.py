from contextlib import contextmanager
from habitare.extensions import db


@contextmanager
def transactional():
    """Commit everything issued inside the block, or nothing at all."""
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
