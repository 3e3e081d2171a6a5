from sqlalchemy import Column, Integer, String, DateTime, Float
from sqlalchemy.sql import func
from app.db import Base


class Progress(Base):
    __tablename__ = "progress"

    id = Column(Integer, primary_key=True, index=True)

    # e.g. "JSM", "GFE", "FEM"; unique per metric
    name = Column(String, unique=True, index=True, nullable=False)

    value = Column(Float, nullable=False, server_default="0")
    target = Column(Float, nullable=True)
    unit = Column(String, nullable=False)

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
