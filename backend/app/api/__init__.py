"""API router aggregator."""
from fastapi import APIRouter, Depends

from app.api.routes import auth, tasks
from app.core.dependencies import get_current_session

# Every /api route sits behind the session gate.
api_router = APIRouter(prefix="/api", dependencies=[Depends(get_current_session)])
api_router.include_router(tasks.router)

auth_router = auth.router

__all__ = ["api_router", "auth_router"]
