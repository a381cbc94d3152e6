import logging

from fastapi import APIRouter
from sqlalchemy import text

from repairdesk.adapters.password_hasher import PasswordHasher
from repairdesk.db import engine
from repairdesk.utils.clock import utcnow

router = APIRouter()
log = logging.getLogger("repairdesk.health")


@router.get("/health", tags=["health"], summary="healthcheck")
def health():
    db_ok = False
    hasher_ok = False
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            db_ok = True
    except Exception:
        log.exception("health: database ping failed")
    try:
        hasher_ok = PasswordHasher().health_check()
    except Exception:
        log.exception("health: password hasher self-check failed")

    return {
        "status": "ok" if db_ok and hasher_ok else "degraded",
        "db": db_ok,
        "password_hasher": hasher_ok,
        "timestamp": utcnow().isoformat(),
    }
