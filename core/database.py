"""
数据库连接管理
- 异步引擎 + 连接池（生产环境 asyncpg，测试环境 aiosqlite）
- 管理器实例由调用方创建并显式注入，不使用全局单例
"""

import sqlite3
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import AsyncIterator, Optional

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from loguru import logger

from . import models  # noqa: F401  注册表定义到 SQLModel.metadata
from .config import Settings
from .exceptions import DatabaseNotInitializedException


def is_memory_sqlite(database_url: str) -> bool:
    """是否为内存 SQLite 数据库"""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return False
    return url.database in (None, "", ":memory:") or url.query.get("mode") == "memory"


class AsyncDatabaseManager:
    """
    异步数据库连接管理器

    每次 get_session() 从连接池取出一个连接，成功提交、失败回滚，
    在所有路径上归还连接
    """

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        pool_recycle: int = 3600,
        echo: bool = False,
    ):
        self.database_url = database_url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_recycle = pool_recycle
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "AsyncDatabaseManager":
        """根据配置创建管理器"""
        return cls(
            settings.get_database_url(),
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_recycle=settings.DB_POOL_RECYCLE,
            echo=settings.DB_ECHO,
        )

    def init(self) -> None:
        """初始化异步数据库引擎和会话工厂"""
        if self._engine is not None:
            logger.warning("AsyncDatabaseManager 已经初始化过")
            return

        engine_options = {"echo": self.echo, "pool_pre_ping": True}  # 使用前验证连接

        # 内存 SQLite 使用 StaticPool，不接受连接池大小参数
        if not is_memory_sqlite(self.database_url):
            engine_options.update(
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                pool_recycle=self.pool_recycle,
            )

        self._engine = create_async_engine(self.database_url, **engine_options)

        # SQLite 默认不检查外键，也不能直接绑定 Decimal
        if self._engine.dialect.name == "sqlite":
            sqlite3.register_adapter(Decimal, str)

            @event.listens_for(self._engine.sync_engine, "connect")
            def enable_foreign_keys(dbapi_conn, connection_record):
                cursor = dbapi_conn.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        logger.info(f"异步数据库管理器初始化完成: dialect={self._engine.dialect.name}")

    async def close(self) -> None:
        """关闭数据库引擎并清理连接"""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("异步数据库连接已关闭")

    @asynccontextmanager
    async def get_session(self) -> AsyncIterator[AsyncSession]:
        """
        获取一个异步数据库会话（上下文管理器）

        用法示例：
            async with db.get_session() as session:
                result = await session.execute(query)
        """
        if self._session_factory is None:
            raise DatabaseNotInitializedException("AsyncDatabaseManager")

        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_tables(self) -> None:
        """创建所有数据库表（用于开发/测试）"""
        if self._engine is None:
            raise DatabaseNotInitializedException("AsyncDatabaseManager")

        async with self._engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        logger.info("数据库表已创建")

    @property
    def engine(self) -> AsyncEngine:
        """获取异步引擎实例"""
        if self._engine is None:
            raise DatabaseNotInitializedException("AsyncDatabaseManager")
        return self._engine

    def is_initialized(self) -> bool:
        """检查是否已初始化"""
        return self._engine is not None
