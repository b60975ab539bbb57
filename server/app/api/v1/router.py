from fastapi import APIRouter

from . import analysis

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(analysis.router, tags=["analysis"])
