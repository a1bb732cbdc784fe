"""
Log endpoints for API v1.

Expose the audit trail: list with filters, fetch one entry, create an
entry by hand and delete entries by ID or by filter.  Logs are never updated.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from log_manager_api.app.api.v1.dependencies import get_log_service
from log_manager_api.app.schemas.log import Log, LogList, LogRequest
from log_manager_api.app.schemas.user import MessageResponse
from log_manager_api.app.services.log_service import LogService

router = APIRouter()


@router.get("/", response_model=LogList)
async def list_logs(
    severity: Optional[str] = Query(None, description="Filter by severity (INFO, WARNING, ERROR)"),
    user: Optional[str] = Query(None, description="Filter by referenced user name"),
    message: Optional[str] = Query(None, description="Substring the message must contain"),
    start_date: Optional[date] = Query(None, description="First day to include (ISO date)"),
    end_date: Optional[date] = Query(None, description="Last day to include (ISO date)"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of logs to return"),
    offset: int = Query(0, ge=0, description="Number of logs to skip"),
    service: LogService = Depends(get_log_service),
) -> LogList:
    """Return log entries, oldest first, wrapped in ``{"result": [...]}``."""
    logs = await service.list_logs(
        severity=severity,
        user=user,
        message=message,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
        offset=offset,
    )
    return LogList(result=logs)


@router.get("/{log_id}", response_model=Log)
async def get_log(log_id: int, service: LogService = Depends(get_log_service)) -> Log:
    return await service.find_log_by_id(log_id)


@router.post("/", response_model=Log, status_code=status.HTTP_201_CREATED)
async def create_log(request: LogRequest, service: LogService = Depends(get_log_service)) -> Log:
    return await service.create_log(request)


@router.delete("/", response_model=MessageResponse)
async def delete_logs(
    ids: Optional[List[int]] = Query(None, description="IDs of the entries to delete"),
    severity: Optional[str] = Query(None, description="Delete entries of this severity"),
    user: Optional[str] = Query(None, description="Delete entries referencing this user"),
    message: Optional[str] = Query(None, description="Delete entries whose message contains this text"),
    start_date: Optional[date] = Query(None, description="First day to include (ISO date)"),
    end_date: Optional[date] = Query(None, description="Last day to include (ISO date)"),
    service: LogService = Depends(get_log_service),
) -> MessageResponse:
    """Delete entries by ID, or every entry matching the filters.

    With ``ids`` the filters are ignored and nothing is deleted if one
    ID is unknown.
    """
    if ids:
        return MessageResponse(message=await service.delete_logs(ids))
    result = await service.delete_logs_by_filter(
        severity=severity,
        user=user,
        message=message,
        start_date=start_date,
        end_date=end_date,
    )
    return MessageResponse(message=result)
