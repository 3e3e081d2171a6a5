from sqlalchemy import Column, Integer, DateTime, Float
from sqlalchemy.sql import func
from app.db import Base


class DailyProgress(Base):
    __tablename__ = "daily_progress"

    id = Column(Integer, primary_key=True, index=True)

    # Selected calendar day stored as midnight UTC of that date, unique per day
    # See app.core.time_utils.utc_midnight / date_from_storage
    date = Column(DateTime(timezone=True), unique=True, index=True, nullable=False)

    flashcards_done = Column(Integer, nullable=False, server_default="0")
    hours_studied = Column(Float, nullable=False, server_default="0")  # e.g. 3.5, at most 24

    # Overall completion snapshot on that day, 0-100 (not a daily delta)
    percent_complete = Column(Integer, nullable=False, server_default="0")

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
