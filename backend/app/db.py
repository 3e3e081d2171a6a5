from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from app.core.config import settings

# SQLAlchemy Base class for models to inherit
Base = declarative_base()

engine_kwargs = {"pool_pre_ping": True}  # helps avoid stale connections
if settings.database_url.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    if ":memory:" in settings.database_url:
        # one shared connection, otherwise every session sees an empty db
        engine_kwargs["poolclass"] = StaticPool

# Create SQLAlchemy engine (Postgres by default)
engine = create_engine(settings.database_url, **engine_kwargs)

# Factory that creates DB sessions
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Dependency we will use in FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
