"""Database Setup.

API 서버와 적재 job이 같은 엔진 구성을 사용합니다.
"""

from __future__ import annotations

from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from bins.setup.config import Settings, get_settings


def build_engine(settings: Settings, database_url: str | None = None) -> AsyncEngine:
    """설정으로 비동기 엔진을 생성합니다 (연결은 첫 쿼리 시점)."""
    return create_async_engine(
        database_url or settings.database_url,
        echo=False,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """세션 팩토리를 생성합니다."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


engine = build_engine(get_settings())
async_session_factory = build_session_factory(engine)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """요청 단위 세션을 반환합니다."""
    async with async_session_factory() as session:
        yield session
