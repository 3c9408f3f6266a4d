"""User operations behind the HTTP layer."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from .entities import UserEntity
from .repository import UserRepository
from .results import Result
from .validation import CreateUpdateCt

log = logging.getLogger(__name__)


class UserDbService:
    """Stores users in the database."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def save(self, ct: CreateUpdateCt) -> Result:
        """Store a new user named after the payload; storage failures are only logged."""
        log.info("ct: %s", ct)
        if ct.name == "":
            return Result().error_message("名称不能为空")
        try:
            self.repository.save(UserEntity(name=ct.name))
        except SQLAlchemyError:
            log.exception("saving user %r failed", ct.name)
        return Result().ok()