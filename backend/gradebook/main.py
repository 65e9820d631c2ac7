"""
Gradebook API - FastAPI main application
"""

import logging

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gradebook.core.config import settings
from gradebook.core.db import get_db
from gradebook.core.errors import add_error_handlers
from gradebook.routers import grading, meta, rooms, score_items, scores, students

logging.basicConfig(level=settings.LOG_LEVEL)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

app = FastAPI(
    title=settings.APP_TITLE,
    description="Grading records: students, score items, scores and derived grades",
    version=settings.APP_VERSION,
)

app.include_router(meta.router, prefix="/api/v1")
app.include_router(rooms.router, prefix="/api/v1")
app.include_router(score_items.router, prefix="/api/v1")
app.include_router(students.router, prefix="/api/v1")
app.include_router(scores.router, prefix="/api/v1")
app.include_router(grading.router, prefix="/api/v1")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_error_handlers(app)


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "Gradebook API",
        "version": settings.APP_VERSION,
        "status": "running",
    }


@app.get("/health")
def health():
    """Health check endpoint"""
    return {"status": "ok"}


@app.get("/health/db")
def health_db(db: Session = Depends(get_db)):
    """Database health check endpoint"""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=503,
            detail={
                "status": "error",
                "database": "unavailable",
                "error": str(exc),
            },
        ) from exc

    return {"status": "ok", "db": "ok"}
