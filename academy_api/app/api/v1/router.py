"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified
prefix.  When new domains are introduced, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import courses, db, trainers

router = APIRouter()

router.include_router(trainers.router, prefix="/trainers", tags=["trainers"])
router.include_router(courses.router, prefix="/courses", tags=["courses"])
router.include_router(db.router, prefix="/db", tags=["db"])
