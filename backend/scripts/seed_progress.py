import logging

from app.core.constants import DEFAULT_METRICS
from app.core.logging import setup_logging
from app.db import Base, SessionLocal, engine
from app.models.progress import Progress

logger = logging.getLogger(__name__)


def seed_default_metrics(db) -> int:
    """Insert the default named metrics, leaving existing names untouched."""
    existing = {name for (name,) in db.query(Progress.name).all()}
    to_add = [
        Progress(name=name, value=value, target=target, unit=unit)
        for name, value, target, unit in DEFAULT_METRICS
        if name not in existing
    ]
    if to_add:
        db.add_all(to_add)
        db.commit()
    return len(to_add)


def main():
    setup_logging()
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        added = seed_default_metrics(db)
        logger.info("Seeded %d default metrics", added)
    finally:
        db.close()


if __name__ == "__main__":
    main()
