from fastapi import APIRouter

from medibloc.core.config import settings

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "MediBloc API",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "api": settings.API_PREFIX,
    }
