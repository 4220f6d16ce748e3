"""SQLAlchemy implementation of the unit-of-work port."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession


class SqlAlchemyUnitOfWork:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        # SAVEPOINT / ROLLBACK TO SAVEPOINT; a failed statement no longer
        # aborts the outer transaction for the statements that follow.
        async with self.db.begin_nested():
            yield
