"""
User management.
"""

from typing import List, Optional

from app.core.exceptions import ValidationError
from app.core.logging import get_logger
from app.core.result import Result, capture_errors
from app.schemas import User
from app.services.store_gateway import StoreGateway
from app.utils import require_text

logger = get_logger()


class UserService:
    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    @capture_errors
    def list(self) -> Result[List[User]]:
        return Result.ok(self.gateway.list_users())

    @capture_errors
    def get(self, user_id: str) -> Result[User]:
        require_text(user_id, "ID")
        user = self.gateway.get_user(user_id)
        if user is None:
            return Result.not_found(f"User not found for ID: {user_id}")
        return Result.ok(user)

    @capture_errors
    def add(self, user: Optional[User]) -> Result[User]:
        if user is None or not user.id:
            raise ValidationError("User or User ID cannot be null")
        self.gateway.create_user(user)
        logger.info("User %s created", user.id)
        return Result.ok(user)

    @capture_errors
    def edit(self, user_id: str, user: Optional[User]) -> Result[User]:
        if user is None or not user_id or user.id != user_id:
            raise ValidationError("User ID cannot be null or different from the ID in the URL")
        if not self.gateway.user_exists(user_id):
            return Result.not_found(f"User not found for ID: {user_id}")
        self.gateway.save_user(user)
        logger.info("User %s updated", user_id)
        return Result.ok(user)

    @capture_errors
    def delete(self, user_id: str) -> Result[User]:
        require_text(user_id, "ID")
        user = self.gateway.get_user(user_id)
        if user is None:
            return Result.not_found(f"User not found for ID: {user_id}")
        self.gateway.delete_user(user_id)
        logger.info("User %s deleted", user_id)
        return Result.ok(user)
