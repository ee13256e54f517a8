from fastapi import APIRouter, Depends
from sqlmodel import Session, text

from app.database import get_session
from app.models.base import utc_now

router = APIRouter()


@router.get("/health")
def health_check(session: Session = Depends(get_session)):
    db_status = "ok"

    try:
        # simple DB ping
        session.exec(text("SELECT 1"))
    except Exception:
        db_status = "failed"

    return {
        "status": "OK",
        "message": "VidyaShare API is running!",
        "timestamp": utc_now().isoformat(),
        "database": db_status,
    }
