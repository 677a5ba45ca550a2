"""
FastAPI 依赖项，用于依赖注入
"""

from fastapi import Request

from core.database import AsyncDatabaseManager
from .repositories import JobRepository


def get_database(request: Request) -> AsyncDatabaseManager:
    """获取应用生命周期内创建的数据库管理器"""
    return request.app.state.db


def get_job_repository(request: Request) -> JobRepository:
    """
    获取绑定到当前数据库管理器的职位仓储

    用法示例:
        @router.get("/endpoint")
        async def endpoint(repo: JobRepository = Depends(get_job_repository)):
            ...
    """
    return JobRepository(get_database(request))
