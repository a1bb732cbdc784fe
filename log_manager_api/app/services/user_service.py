"""
Business logic for users.

``UserService`` runs the guards of ``UserValidationService`` before
touching the store, then persists and finally records an audit entry
through ``LogService``.  The first failing guard aborts the operation;
since all collaborators share the request's transaction, nothing the
operation wrote stays visible in that case.
"""

import logging
from typing import List, Optional

from ..core.messages import InfoMessages
from ..repositories.user_repository import UserRepository
from ..schemas.log import Severity
from ..schemas.user import User, UserRequest
from . import bmi_service
from .log_service import LogService
from .user_validation_service import UserValidationService

logger = logging.getLogger(__name__)


class UserService:
    def __init__(
        self,
        user_repository: UserRepository,
        log_service: LogService,
        validation_service: UserValidationService,
    ):
        self.user_repository = user_repository
        self.log_service = log_service
        self.validation_service = validation_service

    async def add_user(self, request: UserRequest) -> str:
        """Create a user on behalf of ``request.actor``.

        The very first user may only be created by themself (actor and
        name equal); afterwards the actor must be an existing user.
        Returns the BMI description of the new user.
        """
        await self.validation_service.check_if_any_entries_are_null(request)
        birthdate = request.get_birthdate_as_date()
        user = User(
            name=request.name,
            birthdate=birthdate,
            weight=request.weight,
            height=request.height,
            favourite_color=request.favourite_color.lower(),
            bmi=bmi_service.calculate(request.weight, request.height),
        )

        await self.validation_service.validate_color_enum(user.favourite_color)
        await self.validation_service.check_if_user_to_post_exists(user.name)
        if await self.validation_service.check_if_users_list_is_empty(request.actor, user, True):
            await self._save_user(user, request.actor)
        else:
            actor = await self.validation_service.check_if_name_exists(request.actor, True)
            await self._save_user(user, actor.name)
        return bmi_service.describe(birthdate, request.weight, request.height)

    async def find_user_list(self) -> List[User]:
        return self.user_repository.find_all()

    async def find_user_by_id(self, user_id: int) -> Optional[User]:
        return self.user_repository.find_by_id(user_id)

    async def delete_by_id(self, user_id: int, actor_name: str) -> str:
        user_to_delete = await self.validation_service.check_if_id_exists(user_id)
        actor = await self.validation_service.check_if_name_exists(actor_name, False)
        await self.validation_service.check_if_user_to_delete_id_equals_actor_id(user_id, actor.id)
        await self.validation_service.check_if_users_list_is_empty(actor.name, user_to_delete, False)
        await self.validation_service.check_if_exist_log_by_user_to_delete(user_to_delete)

        self.user_repository.delete_by_id(user_id)
        return await self._log_deletion(user_id, actor_name)

    async def delete_by_name(self, name: str, actor_name: str) -> str:
        user = await self.validation_service.check_if_name_exists(name, False)
        await self.validation_service.check_if_exist_log_by_user_to_delete(user)
        await self.validation_service.check_if_name_exists(actor_name, False)
        await self.validation_service.check_if_user_to_delete_equals_actor(name, actor_name)

        self.user_repository.delete_by_id(user.id)
        return await self._log_deletion(user.id, actor_name)

    async def delete_all(self, actor_name: str) -> str:
        await self.validation_service.check_if_users_are_referenced()
        self.user_repository.delete_all()
        logger.info(InfoMessages.ALL_USERS_DELETED)
        await self.log_service.add_log(InfoMessages.ALL_USERS_DELETED, Severity.INFO.value, actor_name)
        return InfoMessages.ALL_USERS_DELETED

    async def _save_user(self, user: User, actor_name: str) -> User:
        saved = self.user_repository.save(user)
        bmi_message = bmi_service.describe(saved.birthdate, saved.weight, saved.height)
        message = InfoMessages.USER_CREATED.format(saved.name) + bmi_message
        logger.info(message)
        await self.log_service.add_log(message, Severity.INFO.value, actor_name)
        return saved

    async def _log_deletion(self, user_id: int, actor_name: str) -> str:
        message = InfoMessages.ENTRIES_DELETED.format(user_id)
        logger.info(message)
        await self.log_service.add_log(message, Severity.WARNING.value, actor_name)
        return message
