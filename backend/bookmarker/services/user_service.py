"""
Bookmarker — User Service (Data Access)
=======================================

What:  List, fetch-by-id and create operations over the `users` collection.
Why:   Keeps query building and storage error handling out of the route handlers.
How:   Each method issues a single statement through the request's AsyncSession.
Who:   Called by the user route handlers.

Error Handling Strategy:
    Every storage failure is wrapped in DatabaseError, on read paths as well
    as on the write path. The global handler turns it into a 500 JSON
    response; nothing is swallowed and nothing escapes as a process fault.

Design Decision:
    UserService is stateless; it receives the db session for each call.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarker.exceptions import DatabaseError
from bookmarker.models.user import User
from bookmarker.schemas.user import UserDocument

logger = logging.getLogger(__name__)


class UserService:
    """
    Data access layer for user documents.

    Responsibilities:
        - list_users(): every document, insertion order, unfiltered
        - get_user(): first document whose `id` equals the given value, or None
        - create_user(): persist a request body verbatim
    """

    async def list_users(self, db: AsyncSession) -> List[UserDocument]:
        """
        Fetch all user documents.

        Query plan:
            SELECT * FROM users ORDER BY pk

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(User).order_by(User.pk))
            users = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing users: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve users. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [UserDocument(**user.to_document()) for user in users]

    async def get_user(self, db: AsyncSession, user_id: str) -> Optional[UserDocument]:
        """
        Fetch the first document whose `id` field equals user_id (exact match).

        A missing document is not an error: the caller receives None.

        Query plan:
            SELECT * FROM users WHERE id = :id ORDER BY pk LIMIT 1
            → Uses idx_users_id

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(
                select(User).where(User.id == user_id).order_by(User.pk).limit(1)
            )
            user = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("Database error fetching user %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the user. Please try again.",
                context={"user_id": user_id, "error_type": type(e).__name__},
            )

        if user is None:
            logger.debug("No user with id %s", user_id)
            return None
        return UserDocument(**user.to_document())

    async def create_user(self, db: AsyncSession, payload: Dict[str, Any]) -> str:
        """
        Persist a new user document built from the request body.

        The body is stored verbatim. `id` is split out into its own column;
        when it is absent or null a uuid4 hex string is generated. Non-string
        ids are stored in their string form so path lookups can match them.

        Returns:
            The stored document id.

        Raises:
            DatabaseError: Insert or commit failed (→ 500). The transaction is
            rolled back by the session dependency.
        """
        attributes = {key: value for key, value in payload.items() if key != "id"}
        raw_id = payload.get("id")
        user_id = uuid.uuid4().hex if raw_id is None else str(raw_id)

        user = User(id=user_id, attributes=attributes)
        try:
            db.add(user)
            # Commit here, not in the dependency teardown: a failed write must
            # reach the client as an error, never after a success response
            await db.flush()
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating user %s: %s", user_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the user. Please try again.",
                context={"user_id": user_id, "error_type": type(e).__name__},
            )

        logger.info("User %s created", user_id)
        return user_id


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
