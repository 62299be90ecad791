"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Notification
from qna.domain.repository import NotificationRepository
from qna.domain.value import NotificationId, UserId
from qna.persistence.mappers import notification_to_dict, row_to_notification
from qna.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _owned(notification_id: NotificationId, recipient_id: UserId):
        return and_(
            notifications_table.c.id == notification_id,
            notifications_table.c.recipient_id == recipient_id,
        )

    @staticmethod
    def _for_recipient(recipient_id: UserId, unread_only: bool):
        clause = notifications_table.c.recipient_id == recipient_id
        if unread_only:
            clause = and_(clause, notifications_table.c.is_read.is_(False))
        return clause

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        await self.session.execute(
            insert(notifications_table).values(**notification_to_dict(notification))
        )
        await self.session.flush()
        return notification

    async def find_by_id(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Find one of a recipient's notifications by ID."""
        stmt = select(notifications_table).where(
            self._owned(notification_id, recipient_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(self._for_recipient(recipient_id, unread_only))
            .order_by(notifications_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a recipient's notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(self._for_recipient(recipient_id, unread_only))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark one notification read."""
        stmt = (
            update(notifications_table)
            .where(self._owned(notification_id, recipient_id))
            .values(is_read=True)
            .returning(*notifications_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_notification(row._asdict()) if row else None

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification read."""
        stmt = (
            update(notifications_table)
            .where(self._for_recipient(recipient_id, unread_only=True))
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Delete one notification."""
        stmt = delete(notifications_table).where(
            self._owned(notification_id, recipient_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
