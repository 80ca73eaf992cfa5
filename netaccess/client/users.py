"""User operations."""

from __future__ import annotations

from netaccess.client import queries
from netaccess.client.base import EntityAPI
from netaccess.schemas.graphql import Envelope
from netaccess.schemas.identity import User, UserUpdate


class UsersAPI(EntityAPI):
    entity = "user"
    entity_plural = "users"

    async def create(self, user: User) -> User:
        """Invite a user.

        mutation userCreate
        ``send_invite`` only exists at creation and is carried over to the result.
        """
        self._require(user.email, "create", "email is empty")
        envelope = await self._mutate(
            "create",
            queries.CREATE_USER,
            user.to_create_variables(),
            field="userCreate",
            envelope_type=Envelope[User],
            require_entity=True,
        )
        return envelope.entity.model_copy(update={"send_invite": user.send_invite})

    async def read(self, user_id: str) -> User:
        self._require(user_id, "read", "id is empty")
        return await self._fetch(
            queries.READ_USER,
            {"id": user_id},
            field="user",
            model=User,
            entity_id=user_id,
        )

    async def update(self, update: UserUpdate) -> User:
        """Apply a partial update; only fields set on ``update`` are sent."""
        self._require(update.id, "update", "id is empty")
        envelope = await self._mutate(
            "update",
            queries.UPDATE_USER,
            update.to_variables(),
            field="userUpdate",
            envelope_type=Envelope[User],
            entity_id=update.id,
            require_entity=True,
        )
        return envelope.entity

    async def delete(self, user_id: str) -> None:
        self._require(user_id, "delete", "id is empty")
        await self._mutate(
            "delete",
            queries.DELETE_USER,
            {"id": user_id},
            field="userDelete",
            entity_id=user_id,
        )

    async def list(self) -> list[User]:
        return await self._fetch_all(queries.READ_USERS, field="users", model=User)
