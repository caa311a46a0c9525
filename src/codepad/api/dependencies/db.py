"""Database dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.codepad.core.config import Settings
from src.codepad.core.db import Database


def get_database(request: Request) -> Database:
    """Get the store client owned by the running application."""
    return request.app.state.database


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


DatabaseDep = Annotated[Database, Depends(get_database)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]


async def get_db_session(database: DatabaseDep) -> AsyncGenerator[AsyncSession]:
    """Get a request-scoped database session."""
    async with database.session() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
