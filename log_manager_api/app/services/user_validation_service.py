"""
Guards for the user lifecycle.

Each ``check_*`` method reads the current persisted state and either
returns (sometimes with the looked-up user) or raises the matching
``LogManagerError``.  Guards never change user data.  Two of them,
the bootstrap check of ``check_if_users_list_is_empty`` and the actor
variant of ``check_if_name_exists``, write a WARNING audit entry right
before they raise; that entry shares the request transaction and is
rolled back together with everything else.
"""

import logging
from typing import Optional

from ..core.errors import (
    IllegalColor,
    NoUsersYet,
    ParameterMissing,
    UserAlreadyExists,
    UserCannotDeleteSelf,
    UserNotFound,
    UserReferenced,
    UsersReferenced,
)
from ..core.messages import ErrorMessages
from ..repositories.user_repository import UserRepository
from ..schemas.log import Severity
from ..schemas.user import Color, User, UserRequest
from .log_service import LogService

logger = logging.getLogger(__name__)


class UserValidationService:
    def __init__(self, user_repository: UserRepository, log_service: LogService):
        self.user_repository = user_repository
        self.log_service = log_service

    async def check_if_any_entries_are_null(self, request: UserRequest) -> None:
        required = (
            request.name,
            request.birthdate,
            request.weight,
            request.height,
            request.favourite_color,
        )
        for value in required:
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ParameterMissing()
        if request.actor is None or not request.actor.strip():
            raise ParameterMissing(ErrorMessages.ACTOR_NOT_PRESENT)

    async def validate_color_enum(self, color: str) -> None:
        if color not in Color.choices():
            raise IllegalColor(Color.choices())

    async def check_if_user_to_post_exists(self, name: str) -> None:
        if self.user_repository.find_user_by_name(name) is not None:
            raise UserAlreadyExists(name)

    async def check_if_users_list_is_empty(
        self, actor_name: Optional[str], user: User, is_create_flow: bool
    ) -> bool:
        """Decide how an operation proceeds while no user exists yet.

        Returns ``True`` only for the bootstrap case: the store is
        empty and the first user creates themself.  Returns ``False``
        when users exist.
        """
        if self.user_repository.find_all():
            return False
        if not is_create_flow:
            raise UserNotFound(user.id)
        if actor_name == user.name:
            return True
        error = NoUsersYet(user.name, actor_name)
        await self.log_service.add_log(error.message, Severity.WARNING.value, actor_name)
        raise error

    async def check_if_name_exists(self, name: Optional[str], is_actor_check: bool) -> User:
        user = self.user_repository.find_user_by_name(name)
        if user is not None:
            return user
        error = UserNotFound(name)
        if is_actor_check:
            await self.log_service.add_log(error.message, Severity.WARNING.value, name)
        raise error

    async def check_if_id_exists(self, user_id: int) -> User:
        user = self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFound(user_id)
        return user

    async def check_if_user_to_delete_id_equals_actor_id(self, user_id: int, actor_id: int) -> None:
        if user_id == actor_id:
            raise UserCannotDeleteSelf()

    async def check_if_user_to_delete_equals_actor(self, name: str, actor_name: str) -> None:
        if name == actor_name:
            raise UserCannotDeleteSelf()

    async def check_if_exist_log_by_user_to_delete(self, user: User) -> None:
        if await self.log_service.exist_log_by_user(user):
            raise UserReferenced(user.name)

    async def check_if_users_are_referenced(self) -> None:
        """Block bulk deletion while any log points at any user."""
        user_names = await self.log_service.find_referenced_user_names()
        referenced = [name for name in user_names if name is not None]
        if referenced:
            logger.debug("Bulk delete blocked, %s log(s) reference users", len(referenced))
            raise UsersReferenced()
