# registrar/core/database.py
"""Database engine and per-request connection management using SQLAlchemy."""
from typing import AsyncGenerator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncConnection, create_async_engine
from sqlalchemy import text
import logging

from .config import settings
from .executor import QueryExecutor

logger = logging.getLogger(__name__)

connect_args = {}
if settings.database_url.startswith("postgresql+asyncpg"):
    connect_args = {
        "server_settings": {
            "application_name": "registrar_api",
        }
    }

engine = create_async_engine(
    settings.database_url,
    pool_pre_ping=True,
    echo=(settings.environment == 'development'),
    connect_args=connect_args,
)

async def get_connection() -> AsyncGenerator[AsyncConnection, None]:
    """Dependency that yields a single store connection for the request"""
    async with engine.connect() as conn:
        yield conn

async def get_executor(conn: AsyncConnection = Depends(get_connection)) -> QueryExecutor:
    """Dependency that wraps the request connection in a query executor"""
    return QueryExecutor(conn)

async def health_check_db():
    """Fast health check"""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False

async def close_db_connections():
    """Properly close all database connections"""
    await engine.dispose()
    logger.info("Database connections closed")
