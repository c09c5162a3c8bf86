"""
Database diagnostics endpoints for API v1.

``/db/ping`` checks connectivity, ``/db/tables`` lists the schema
objects and ``/db/sample`` returns up to ten rows from one of the
whitelisted tables.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query

from academy_api.app.api.deps import get_db_service
from academy_api.app.schemas.db import PingResult, SampleTable
from academy_api.app.services.db_service import DbService


router = APIRouter()


@router.get("/ping", response_model=PingResult)
def ping(service: DbService = Depends(get_db_service)) -> PingResult:
    return PingResult(status=service.ping())


@router.get("/tables", response_model=List[str])
def list_tables(service: DbService = Depends(get_db_service)) -> List[str]:
    return service.list_tables()


@router.get("/sample")
def sample(
    table: SampleTable = Query(...),
    service: DbService = Depends(get_db_service),
) -> List[Dict[str, Any]]:
    """Return up to ten rows from ``table``."""
    return service.sample(table)
