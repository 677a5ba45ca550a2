"""
Pytest configuration and shared fixtures.
"""

from typing import Any, Dict, List

import pytest
import pytest_asyncio
from sqlalchemy import text

from api.repositories import JobRepository
from api.schemas import Job
from core.database import AsyncDatabaseManager


COMPANIES: List[Dict[str, Any]] = [
    {
        "handle": "acme",
        "name": "Acme Corp",
        "description": "Widgets and more",
        "num_employees": 120,
        "logo_url": "https://acme.example.com/logo.png",
    },
    {
        "handle": "beta",
        "name": "Beta LLC",
        "description": None,
        "num_employees": None,
        "logo_url": None,
    },
]

JOBS: List[Dict[str, Any]] = [
    {"title": "Backend Engineer", "salary": 120000, "equity": 0.01, "companyHandle": "acme"},
    {"title": "Data Engineer", "salary": 90000, "equity": 0, "companyHandle": "acme"},
    {"title": "Accountant", "salary": 60000, "equity": None, "companyHandle": "beta"},
    {"title": "Senior ENGINEERING Manager", "salary": 200000, "equity": 0.05, "companyHandle": "beta"},
    {"title": "Designer", "companyHandle": "acme"},
]


@pytest_asyncio.fixture
async def db(tmp_path) -> AsyncDatabaseManager:
    """File-backed SQLite database with both tables and two companies."""
    manager = AsyncDatabaseManager(
        f"sqlite+aiosqlite:///{tmp_path / 'jobly_test.db'}",
        pool_size=5,
        max_overflow=0,
    )
    manager.init()
    await manager.create_tables()

    async with manager.get_session() as session:
        await session.execute(
            text(
                "INSERT INTO companies (handle, name, description, num_employees, logo_url) "
                "VALUES (:handle, :name, :description, :num_employees, :logo_url)"
            ),
            COMPANIES,
        )

    yield manager
    await manager.close()


@pytest.fixture
def repo(db) -> JobRepository:
    return JobRepository(db)


@pytest_asyncio.fixture
async def jobs(repo) -> List[Job]:
    """Insert the sample jobs and return them in insertion order."""
    return [await repo.create(data) for data in JOBS]
