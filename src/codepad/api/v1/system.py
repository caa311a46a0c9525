"""Operational endpoints: database check and schema initialisation."""

from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from src.codepad.api.dependencies import DatabaseDep
from src.codepad.core.logging import get_logger
from src.codepad.schemas import DatabaseCheckResponse, SuccessResponse

logger = get_logger(__name__)

router = APIRouter(tags=["system"])


@router.get(
    "/db-test",
    response_model=DatabaseCheckResponse,
    summary="Check database connectivity",
    responses={500: {"description": "Database unreachable"}},
)
async def db_test(database: DatabaseDep) -> DatabaseCheckResponse | JSONResponse:
    try:
        now = await database.server_time()
    except Exception:
        logger.exception("Database connectivity check failed")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Database connection failed"},
        )
    time = now.isoformat() if isinstance(now, datetime) else str(now)
    return DatabaseCheckResponse(success=True, time=time)


@router.get(
    "/init-db",
    response_model=SuccessResponse,
    summary="Create tables",
    description="Create the projects and files tables if they are missing. Idempotent.",
)
async def init_db(database: DatabaseDep) -> SuccessResponse:
    await database.create_schema()
    return SuccessResponse()
