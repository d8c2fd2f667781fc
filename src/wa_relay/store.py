import logging

from sqlalchemy import Column, MetaData, String, Table, Text, insert, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel.ext.asyncio.session import AsyncSession

from .errors import UpstreamError
from .models import MessageRecord

logger = logging.getLogger(__name__)


def message_table(name: str, metadata: MetaData | None = None) -> Table:
    """Table holding MessageRecord rows, under a configurable name"""
    return Table(
        name,
        metadata if metadata is not None else MetaData(),
        Column("id", String(36), primary_key=True),
        Column("sender", String(255), nullable=False),
        Column("recipient", String(255), nullable=False, index=True),
        Column("content", Text, nullable=False),
        Column("timestamp", String(32), nullable=False, index=True),
    )


class MessageStore:
    """Append-only store of sent messages. Rows are inserted, never updated."""

    def __init__(self, engine: AsyncEngine, table_name: str):
        self.engine = engine
        self.table = message_table(table_name)

    async def create_table(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(self.table.metadata.create_all)

    async def put(self, record: MessageRecord) -> None:
        try:
            async with AsyncSession(self.engine) as session:
                await session.exec(insert(self.table).values(**record.model_dump()))
                await session.commit()
        except SQLAlchemyError as exc:
            raise UpstreamError("store", f"{type(exc).__name__}: {exc}") from exc

        logger.debug(f"Stored message {record.id} in {self.table.name}")

    async def ping(self) -> bool:
        async with self.engine.connect() as conn:
            result = await conn.execute(text("SELECT 1 + 1 AS test_result"))
            return result.scalar() == 2
