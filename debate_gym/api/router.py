"""Main API router — aggregates all endpoint modules."""

from fastapi import APIRouter

from debate_gym.api.drills import router as drills_router
from debate_gym.api.sparring import router as sparring_router
from debate_gym.api.void import router as void_router

api_router = APIRouter()

api_router.include_router(void_router, prefix="/void", tags=["void"])
api_router.include_router(drills_router, prefix="/drills", tags=["drills"])
api_router.include_router(sparring_router, prefix="/ai", tags=["ai"])
