from fastapi import APIRouter, HTTPException, Request
from sqlmodel import text

router = APIRouter(tags=["health"])


@router.get("/health")
def health_app():
    return {"ok": True}


@router.get("/health/db")
def health_db(request: Request):
    # Migration is a deployment concern. Runtime only verifies DB connectivity.
    try:
        with request.app.state.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"ok": True}
    except Exception:
        raise HTTPException(status_code=500, detail="Database connection failed")
