# doctors_portal/routers/health.py
from fastapi import APIRouter, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError

from doctors_portal.db.sql import ping_db

router = APIRouter()


@router.get("/")
async def root():
    return {"success": True, "message": "Doctors Server is Running....."}


@router.get("/health")
async def health_root():
    return {"status": "ok"}


@router.get("/health/db")
async def health_db(request: Request):
    """
    Validates store connectivity with SELECT 1.
    Returns 503 if no connectivity (useful for readiness/liveness checks).
    Uses its own session so no audit row is written.
    """
    engine = request.app.state.engine
    try:
        async with request.app.state.session_factory() as session:
            await ping_db(session)
    except SQLAlchemyError as exc:
        # Don't expose internal details
        raise HTTPException(status_code=503, detail="database_unavailable") from exc
    return {"status": "ok", "database": engine.dialect.name}
