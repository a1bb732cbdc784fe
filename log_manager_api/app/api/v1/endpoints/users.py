"""
User endpoints for API v1.

Create, list, fetch and delete users.  Every mutating route takes the
name of the acting user (``actor``), who is recorded in the audit
log.  Business-rule failures surface as ``LogManagerError`` and are
turned into responses by the global error handlers.
"""

from fastapi import APIRouter, Depends, Query, status

from log_manager_api.app.api.v1.dependencies import get_user_service
from log_manager_api.app.core.errors import UserNotFound
from log_manager_api.app.schemas.user import MessageResponse, User, UserList, UserRequest
from log_manager_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def add_user(
    request: UserRequest,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Create a user and return its BMI description.

    The first user of an empty database must name themself as actor.
    """
    return MessageResponse(message=await service.add_user(request))


@router.get("/", response_model=UserList)
async def list_users(service: UserService = Depends(get_user_service)) -> UserList:
    """Return all users wrapped in ``{"result": [...]}``."""
    return UserList(result=await service.find_user_list())


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> User:
    user = await service.find_user_by_id(user_id)
    if user is None:
        raise UserNotFound(user_id)
    return user


@router.delete("/by-name/{name}", response_model=MessageResponse)
async def delete_user_by_name(
    name: str,
    actor: str = Query(..., description="Name of the acting user"),
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete a user by name.

    Fails if the user is referenced by any log or if the actor tries
    to delete themself.
    """
    return MessageResponse(message=await service.delete_by_name(name, actor))


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user_by_id(
    user_id: int,
    actor: str = Query(..., description="Name of the acting user"),
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete a user by ID; same rules as deletion by name."""
    return MessageResponse(message=await service.delete_by_id(user_id, actor))


@router.delete("/", response_model=MessageResponse)
async def delete_all_users(
    actor: str = Query(..., description="Name of the acting user"),
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete every user.  Refused while any log references a user."""
    return MessageResponse(message=await service.delete_all(actor))
