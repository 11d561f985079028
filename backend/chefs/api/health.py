from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from chefs.core.database import get_db

router = APIRouter()


@router.get("/health")
async def health_check(db: Session = Depends(get_db)):
    """Health check endpoint - verifies database connectivity."""
    health_status = {
        "status": "healthy",
        "database": "disconnected",
    }

    try:
        db.execute(text("SELECT 1"))
        health_status["database"] = "connected"
    except Exception as e:
        health_status["status"] = "unhealthy"
        health_status["database"] = f"error: {str(e)}"

    return health_status
