import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db import get_db
from app.models.progress import Progress
from app.schemas.progress import ProgressRead, ProgressUpsert

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=list[ProgressRead])
def list_progress(db: Session = Depends(get_db)):
    try:
        return db.query(Progress).order_by(Progress.id).all()
    except SQLAlchemyError:
        logger.exception("Error fetching progress")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch progress"})


@router.post("", response_model=ProgressRead)
def upsert_progress(payload: ProgressUpsert, db: Session = Depends(get_db)):
    """Create or update the named metric `payload.name`."""
    try:
        row = db.query(Progress).filter(Progress.name == payload.name).first()
        if not row:
            row = Progress(
                name=payload.name,
                value=payload.value,
                target=payload.target,
                unit=payload.unit,
            )
            db.add(row)
        else:
            row.value = payload.value
            row.target = payload.target
            row.unit = payload.unit
        db.commit()
        db.refresh(row)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error updating progress %s", payload.name)
        return JSONResponse(status_code=500, content={"error": "Failed to update progress"})

    logger.info("Saved metric %s = %s %s", row.name, row.value, row.unit)
    return row
